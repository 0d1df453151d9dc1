from typing import Optional

import numpy as np

from crypto_primality.core import RandomSource


class SeededRandomSource(RandomSource):
    """
    A reproducible random source for tests and benchmarks.

    Two instances created with the same seed yield the same byte stream, so
    verdicts and generated candidates can be replayed. It is NOT suitable for
    producing real key material, and an instance must not be shared between
    threads: numpy generators are not synchronized.

    Args:
        seed (int, optional): The seed. Defaults to None (fresh OS entropy).
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Number of bytes cannot be negative.")
        return self._generator.bytes(n)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"
