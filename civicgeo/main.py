from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging
import time

from civicgeo import __version__
from civicgeo.middleware.error_handler import error_handler_middleware, setup_error_handlers
from civicgeo.middleware.request_id import RequestIDMiddleware
from civicgeo.routers import geo_router

logger = logging.getLogger("civicgeo.main")

app = FastAPI(
    title="Civic Geo API",
    description="Geofencing and geographic search helpers for civic-issue reports",
    version=__version__,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and duration."""
    start_time = time.time()
    path = request.url.path
    method = request.method

    skip_logging = path == "/health"

    if not skip_logging:
        logger.info(f"{method} {path}")

    response = await call_next(request)

    if not skip_logging:
        process_time = time.time() - start_time
        logger.info(f"{method} {path} - {response.status_code} - {process_time:.3f}s")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(error_handler_middleware)

# Added last so the request ID is set before the other middlewares log
app.add_middleware(RequestIDMiddleware)

setup_error_handlers(app)

app.include_router(geo_router.router)


@app.get("/")
async def root():
    return {"message": "Civic Geo API", "version": __version__}


@app.get("/health")
async def health_check():
    return {"status": "ok"}
