"""Logging configuration for the command line entry point."""
import logging
import sys

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", structured: bool = False):
    """Configure root logging; structured mode emits messages unchanged."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s" if structured else PLAIN_FORMAT,  # JSON already formatted
        stream=sys.stderr,
        force=True,
    )
