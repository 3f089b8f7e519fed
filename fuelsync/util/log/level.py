import logging
import os
import re
from typing import Callable, Optional


LEVELS = ['TRACE', 'DEBUG', 'INFO', 'WARN', 'ERROR', 'FATAL']


def compile_level_config(config: str) -> Callable[[str], int]:
    variants = []
    for ns in config.split(','):
        ns = ns.strip()
        pattern = f'^{"(.*)".join(re.escape(p) for p in ns.split("*"))}(\\..*)?$'
        regex = re.compile(pattern)

        def match_variant(ns: str, regex=regex):
            m = regex.match(ns)
            if m is None:
                return 0

            specificity = len(ns) + 1
            for group in m.groups():
                if group is not None:
                    specificity -= len(group)
            return specificity

        variants.append(match_variant)

    def match_level(ns: str) -> int:
        specificity = 0
        for variant in variants:
            specificity = max(specificity, variant(ns))
        return specificity

    return match_level


def _no_match(ns: str) -> int:
    return 0


class NamespaceFilter(logging.Filter):
    """Per-namespace levels, e.g. FUELSYNC_DEBUG=fuelsync.executor.*"""

    def __init__(self, root_ns: Optional[str]):
        super().__init__()
        self.root_ns = root_ns
        self.levels = [_no_match] * len(LEVELS)

    def configure(self, level: int, config: str) -> None:
        self.levels[level] = compile_level_config(config)

    def ns_level(self, ns: str) -> Optional[int]:
        specificity = 0
        level = logging.INFO if self.is_root_ns(ns) else None
        for i, matcher in enumerate(self.levels):
            s = matcher(ns)
            if s > specificity:
                level = i * 10
                specificity = s
        return level

    def is_root_ns(self, ns: str) -> bool:
        return self.root_ns is not None and ns.startswith(self.root_ns)

    def filter(self, record: logging.LogRecord) -> bool:
        level = self.ns_level(record.name)
        if level is None:
            return record.levelno >= logging.WARNING
        return record.levelno >= level


def configure_from_env(ns_filter: NamespaceFilter, prefix: str) -> Optional[int]:
    min_level = None
    for level, name in enumerate(LEVELS):
        if env := os.getenv(f'{prefix}_{name}'):
            ns_filter.configure(level, env)
            if min_level is None:
                min_level = level * 10
    return min_level
