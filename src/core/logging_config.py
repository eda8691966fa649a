import logging
import sys
import os


def setup_logging(level: str = None) -> logging.Logger:
    """Configure logging for the pitchsign console."""
    log_level = level or os.environ.get("LOG_LEVEL", "WARNING")
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # Configure our namespace logger
    root = logging.getLogger("pitchsign")
    root.setLevel(numeric_level)
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.propagate = False  # prevent duplicate output via root logger

    logging.basicConfig(level=logging.WARNING)

    # Quiet noisy libraries
    for name in ("asyncio", "numpy"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
