"""
Application settings and configuration.

Defaults for the recommender and the weather service client. Network
settings and the log level can be overridden from the environment.
For the model coefficients, see tirerec.physics.
"""

import logging
import os
from typing import Any, Dict

APP_NAME = "tirerec"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "Bicycle tire pressure and wind heading recommender"

# Pressure compensation defaults
DEFAULT_REF_TEMP_C = 20.0
DEFAULT_KEEP_ABSOLUTE_CONSTANT = False

# Supported total system weight (rider + bike + kit)
MIN_SYSTEM_WEIGHT_LBS = 75.0
MAX_SYSTEM_WEIGHT_LBS = 450.0

# Heading search defaults
DEFAULT_RESOLUTION_DEG = 5.0
DEFAULT_CROSSWIND_PENALTY = 0.4
DEFAULT_MIN_SEPARATION_DEG = 15.0
DEFAULT_TOP_K = 3

# Weather service (Open-Meteo, no API key)
FORECAST_URL = os.environ.get("TIREREC_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
ELEVATION_URL = os.environ.get("TIREREC_ELEVATION_URL", "https://api.open-meteo.com/v1/elevation")
HTTP_TIMEOUT = float(os.environ.get("TIREREC_HTTP_TIMEOUT", "10.0"))
FORECAST_PAST_DAYS = 1
FORECAST_DAYS = 2

# Logging configuration
LOG_LEVEL = os.environ.get("TIREREC_LOG_LEVEL", "INFO").upper()
LOGGING_CONFIG: Dict[str, Any] = {
    "level": getattr(logging, LOG_LEVEL, logging.INFO),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def configure_logging(level: Any = None) -> None:
    """Configure root logging for the CLI and server entry points."""
    logging.basicConfig(
        level=level if level is not None else LOGGING_CONFIG["level"],
        format=LOGGING_CONFIG["format"],
    )
