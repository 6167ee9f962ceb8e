import os
import logging

# -----------------------------
# Server
# -----------------------------
APP_NAME = os.getenv("APP_NAME", "loadgen")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

# -----------------------------
# Logging
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL)


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{APP_NAME}.{name}")
    return logging.getLogger(APP_NAME)


def level_number(level: str) -> int:
    """
    Numeric level for a name logging accepts, aliases like WARN included.
    uvicorn takes the number but only its own lowercase names as strings.
    """
    return logging.getLevelName(level.upper())
