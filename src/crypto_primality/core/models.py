from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Verdict:
    """
    Represents the outcome of a Miller-Rabin compositeness test.

    A verdict is either COMPOSITE (proven) or PROBABLY_PRIME (no evidence of
    compositeness was found). It deliberately has no truth value: callers must
    convert it explicitly through `is_composite` or `is_probably_prime`, so the
    representation can later be swapped for a constant-time choice type without
    changing call sites.

    Attributes:
        composite (bool): True if a witness proved the candidate composite.

    Raises:
        ValueError: If composite is not a bool.
    """
    composite: bool

    COMPOSITE: ClassVar["Verdict"]
    PROBABLY_PRIME: ClassVar["Verdict"]

    def __post_init__(self):
        if not isinstance(self.composite, bool):
            raise ValueError("Verdict flag must be a bool.")

    def __bool__(self):
        raise TypeError(
            "Verdict has no truth value; use .is_composite or .is_probably_prime."
        )

    def __repr__(self) -> str:
        return "Verdict.COMPOSITE" if self.composite else "Verdict.PROBABLY_PRIME"

    @property
    def is_composite(self) -> bool:
        """True if the candidate was proven composite."""
        return self.composite

    @property
    def is_probably_prime(self) -> bool:
        """True if the candidate survived every trial."""
        return not self.composite


Verdict.COMPOSITE = Verdict(True)
Verdict.PROBABLY_PRIME = Verdict(False)
