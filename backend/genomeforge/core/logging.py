import logging
import os

from dotenv import load_dotenv, find_dotenv

# Load .env file (walks up directories to find it)
load_dotenv(find_dotenv())

LOG_LEVEL = os.environ.get("GENOMEFORGE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once for the API process."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


configure_logging()
