from __future__ import annotations

import contextlib
import logging
import time

from typing import Iterator


@contextlib.contextmanager
def measure_time(name: str) -> Iterator[None]:
    start = time.time()
    try:
        yield
    finally:
        logging.debug("%s took %.3fs", name, time.time() - start)
