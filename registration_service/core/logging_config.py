"""Logging setup for the application (standard library logging)."""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once with a stdout stream handler.
    
    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    
    # Replace handlers installed by an earlier call (reload, tests)
    for handler in list(root.handlers):
        if getattr(handler, "_registration_service", False):
            root.removeHandler(handler)
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._registration_service = True  # type: ignore[attr-defined]
    root.addHandler(handler)
