import logging
import os


LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

logger = logging.getLogger("fixitpapa")
logger.setLevel(LOG_LEVEL.upper())

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
