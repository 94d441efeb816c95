"""
Configurable logging setup for the civicgeo API and CLI.

Loads the logging configuration from a YAML file.
"""
import logging
import logging.config
from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    config_path: Optional[Union[str, Path]] = None,
    default_level: int = logging.INFO,
    level: Optional[int] = None,
) -> None:
    """
    Configure logging from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.
                     If None, uses civicgeo/config/logging_config.yaml
        default_level: Logging level used when the configuration cannot be loaded
        level: Overrides the civicgeo logger level set by the file
    """
    if config_path is None:
        config_path = Path(__file__).parent / "logging_config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)

            logging.config.dictConfig(config)
            if level is not None:
                logging.getLogger("civicgeo").setLevel(level)

            logger = logging.getLogger(__name__)
            logger.info(f"Logging configured from: {config_path}")

        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            # Fall back to basic configuration on a bad file
            logging.basicConfig(level=default_level, format=DEFAULT_FORMAT)
            logging.error(f"Failed to load logging configuration: {e}")
            logging.warning("Using default logging configuration")
    else:
        logging.basicConfig(level=default_level, format=DEFAULT_FORMAT)
        logging.warning(f"Logging configuration file not found: {config_path}")
        logging.info("Using default logging configuration")
