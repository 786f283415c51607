import logging
import os

DATABASE_URL = os.getenv("BOOKLENDING_DB", "sqlite:///./booklending.db")
LOG_LEVEL = os.getenv("BOOKLENDING_LOG", "INFO")
HOST = os.getenv("BOOKLENDING_HOST", "127.0.0.1")
PORT = int(os.getenv("BOOKLENDING_PORT", "8000"))


def configure_logging(level: str = LOG_LEVEL):
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s - %(message)s")
