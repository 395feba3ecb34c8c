import logging

from .logger import ROOT_LOGGER_NAME


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Does not configure anything: hosts call ``configure_logging`` (or set up
    stdlib logging themselves) at startup.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
