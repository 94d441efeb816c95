import uvicorn

from civicgeo.config.logging_setup import setup_logging
from civicgeo.config.settings import get_settings


def main():
    """Start the API server locally."""
    setup_logging()
    settings = get_settings()

    print(f"Starting API on http://{settings.civicgeo_host}:{settings.civicgeo_port}")
    print("Press CTRL+C to quit.")

    uvicorn.run(
        "civicgeo.main:app",
        host=settings.civicgeo_host,
        port=settings.civicgeo_port,
        log_config=None  # Keep the configuration loaded by setup_logging
    )


if __name__ == "__main__":
    main()
