from .exceptions import CapacityError, SearchCancelledError, SearchExhaustedError
from .interfaces import RandomSource

from .models import Verdict

__all__ = [
    "CapacityError",
    "RandomSource",
    "SearchCancelledError",
    "SearchExhaustedError",
    "Verdict",
]
