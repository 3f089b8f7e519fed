import logging
import sys
from typing import Optional

from .format import TextFormatter
from .level import NamespaceFilter, configure_from_env


_handler: Optional[logging.Handler] = None


def init_logging(root_ns: str = 'fuelsync', env_prefix: str = 'FUELSYNC') -> bool:
    """Install the stderr log handler.

    Only the `root_ns` logger level is changed, the root logger keeps the level
    of the host application.
    Safe to call several times, returns False when logging was already set up.
    """
    global _handler
    if _handler is not None:
        return False

    ns_filter = NamespaceFilter(root_ns)
    min_level = configure_from_env(ns_filter, env_prefix)
    if min_level is None:
        min_level = logging.INFO

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(TextFormatter(colors=sys.stderr.isatty()))
    h.addFilter(ns_filter)
    logging.getLogger().addHandler(h)

    # level 0 would mean NOTSET and inherit the root level
    logging.getLogger(root_ns).setLevel(max(min(min_level, logging.INFO), 1))
    _handler = h
    return True
