class CapacityError(ValueError):
    """Raised when a requested bit length does not fit the configured integer capacity."""


class SearchExhaustedError(RuntimeError):
    """Raised when a bounded prime search tested its maximum number of candidates."""


class SearchCancelledError(RuntimeError):
    """Raised when a prime search is cancelled between two candidates."""
