import logging
import sys


def configure_logging(level="INFO") -> None:
    """Install a single stdout handler on the root logger."""
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    root = logging.getLogger()
    for h in list(root.handlers):
        # keep pytest's capture handlers
        if type(h) is logging.StreamHandler:
            root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level if isinstance(level, int) else level.upper())
