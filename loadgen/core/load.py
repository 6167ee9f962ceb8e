from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional
import math
import random
import time

from loadgen.core.config import get_logger

logger = get_logger("load")

ITERATIONS_PER_UNIT = 100
MESSAGE_TEMPLATE = "Hello Jon!! The number of itterations was: {n} The run time was:{ms}ms"


@dataclass(frozen=True)
class LoadResult:
    n: int
    iterations: int       # loop bodies actually executed
    elapsed_ms: int

    @property
    def message(self) -> str:
        return MESSAGE_TEMPLATE.format(n=self.n, ms=self.elapsed_ms)

    def to_dict(self):
        d = asdict(self)
        d["message"] = self.message
        return d


def run_load(n: int, rng: Optional[random.Random] = None) -> LoadResult:
    """
    Burn CPU for n * 100 iterations of sin(cos(sin(cos(r)))).
    No bounds on n: zero or negative values skip the loop entirely.
    """
    if rng is None:
        rng = random.Random()

    logger.debug(f"Starting load: n={n}")

    iterations = max(0, n * ITERATIONS_PER_UNIT)
    start = time.monotonic()
    for _ in range(iterations):
        r = rng.random()
        math.sin(math.cos(math.sin(math.cos(r))))
    elapsed_ms = int((time.monotonic() - start) * 1000)

    result = LoadResult(n=n, iterations=iterations, elapsed_ms=elapsed_ms)
    logger.info(f"Load finished: {result.to_dict()}")
    return result


def create_load(n: int) -> str:
    return run_load(n).message
