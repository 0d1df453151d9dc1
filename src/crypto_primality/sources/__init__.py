from .system_random import SystemRandomSource
from .seeded_random import SeededRandomSource

__all__ = [
    "SeededRandomSource",
    "SystemRandomSource",
]
