import logging
import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("botmerge")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

# Configure logging on package import
log_level = os.environ.get("APP_LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO")).upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(levelname)s:%(name)s:%(message)s",
    force=True,
)
