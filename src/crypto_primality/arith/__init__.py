from .uint import (
    LIMB_BITS,
    U64,
    U128,
    U256,
    U512,
    U1024,
    U2048,
    U4096,
    U8192,
    Uint,
    UintCapability,
)

from .montgomery import MontyForm, MontyParams

__all__ = [
    "LIMB_BITS",
    "MontyForm",
    "MontyParams",
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
]
