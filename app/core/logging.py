import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging(level: str = "INFO") -> None:
    """Route all application logs to stdout with a single handler."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # create_app may run more than once per process (tests); avoid stacking handlers
    for handler in root.handlers:
        if getattr(handler, "_wins_coach", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._wins_coach = True  # type: ignore[attr-defined]
    root.addHandler(handler)
