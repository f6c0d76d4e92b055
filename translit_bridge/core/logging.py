import logging
import sys

NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO"):
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    root.setLevel(getattr(logging, level, logging.INFO))
    root.addHandler(handler)
    # httpx logs every request line at INFO
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
