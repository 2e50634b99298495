"""Logging setup shared by the link-discovery modules."""

import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s | %(message)s"

_configured = False


def get_logger(name: str = "linkscope") -> logging.Logger:
    """Return a child of the ``linkscope`` logger, configuring it once."""
    global _configured
    root = logging.getLogger("linkscope")

    if not _configured:
        root.setLevel(logging.DEBUG)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)
        _configured = True

    if name == "linkscope":
        return root
    return root.getChild(name)
