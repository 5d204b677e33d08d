"""Wall-clock timing of run sections, logged and handed back to the caller."""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class SectionTiming:
    """Elapsed seconds of a timed section; ``elapsed`` is None while it runs."""
    name: str
    elapsed: Optional[float] = None


@contextmanager
def section_timer(name: str, logger: logging.Logger) -> Iterator[SectionTiming]:
    """Time the enclosed block and record the result on the yielded timing.

    The elapsed time is recorded and logged even when the block raises.
    """
    timing = SectionTiming(name)
    t0 = time.perf_counter()
    try:
        yield timing
    finally:
        timing.elapsed = time.perf_counter() - t0
        logger.info("TIMER %s took %.3f s", name, timing.elapsed)
