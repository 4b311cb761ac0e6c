"""
Logging setup for the API process.

``setup_logging`` attaches a console handler to the root logger the first
time it runs and leaves an already configured logger alone, so tests and
repeated ``create_app`` calls do not stack handlers.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
