"""Identifier generation for extracted records."""

import itertools
import random
import threading
import time
from typing import Callable, Dict

# Takes a record prefix ('chapter', 'char') and returns a fresh identifier
IdGenerator = Callable[[str], str]


def default_id_generator(prefix: str) -> str:
    """Time- and randomness-derived identifier, e.g. ``chapter_1718000000000_483920``."""
    millis = int(time.time() * 1000)
    return f"{prefix}_{millis}_{random.randint(0, 999999):06d}"


class SequentialIdGenerator:
    """
    Deterministic identifiers (``chapter_1``, ``chapter_2``, ``char_1`` ...).

    Counters are kept per prefix, so two generators fed the same sequence of
    prefixes produce the same identifiers.
    """

    def __init__(self, start: int = 1):
        self._start = start
        self._counters: Dict[str, itertools.count] = {}
        self._lock = threading.Lock()

    def __call__(self, prefix: str) -> str:
        with self._lock:
            counter = self._counters.setdefault(prefix, itertools.count(self._start))
            return f"{prefix}_{next(counter)}"
