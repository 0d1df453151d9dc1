from .arith import U64, U128, U256, U512, U1024, U2048, U4096, U8192, Uint, UintCapability
from .core import (
    CapacityError,
    RandomSource,
    SearchCancelledError,
    SearchExhaustedError,
    Verdict,
)
from .miller_rabin import generate_probable_prime, is_composite
from .sources import SeededRandomSource, SystemRandomSource

__all__ = [
    "CapacityError",
    "RandomSource",
    "SearchCancelledError",
    "SearchExhaustedError",
    "SeededRandomSource",
    "SystemRandomSource",
    "U64",
    "U128",
    "U256",
    "U512",
    "U1024",
    "U2048",
    "U4096",
    "U8192",
    "Uint",
    "UintCapability",
    "Verdict",
    "generate_probable_prime",
    "is_composite",
]
