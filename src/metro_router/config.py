"""Configuration settings for the metro router."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# HTTP server
HOST = os.getenv("METRO_ROUTER_HOST", "0.0.0.0")
PORT = int(os.getenv("METRO_ROUTER_PORT", os.getenv("PORT", "8000")))

# Comma-separated list of allowed CORS origins ("*" allows any origin)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("METRO_ROUTER_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Logging
LOG_LEVEL = os.getenv("METRO_ROUTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging for the server and CLI."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
