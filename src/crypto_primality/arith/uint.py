from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple, Union

from crypto_primality.core import CapacityError, RandomSource

LIMB_BITS = 64


@dataclass(frozen=True, slots=True)
class UintCapability:
    """
    Describes a fixed integer capacity measured in 64-bit limbs.

    A capability pairs the nominal width with its doubled width (`wide`), which
    Montgomery arithmetic needs for intermediate products. Deriving one from the
    other means the two can never be mismatched.

    Attributes:
        limbs (int): The number of limbs; the capacity is limbs * 64 bits.

    Raises:
        ValueError: If limbs is not a positive integer.
    """
    limbs: int

    def __post_init__(self):
        if isinstance(self.limbs, bool) or not isinstance(self.limbs, int):
            raise ValueError("Limb count must be an integer.")
        if self.limbs <= 0:
            raise ValueError("Limb count must be positive.")

    @property
    def bits(self) -> int:
        return self.limbs * LIMB_BITS

    @property
    def wide(self) -> "UintCapability":
        """The doubled-width capability holding products of two values."""
        return UintCapability(self.limbs * 2)

    @property
    def max_value(self) -> "Uint":
        return Uint((1 << self.bits) - 1, self)

    @property
    def zero(self) -> "Uint":
        return Uint(0, self)

    @property
    def one(self) -> "Uint":
        return Uint(1, self)

    def from_int(self, value: int) -> "Uint":
        """Wraps a non-negative int, raising OverflowError if it does not fit."""
        return Uint(value, self)

    def fits(self, value: int) -> bool:
        return 0 <= value and value.bit_length() <= self.bits


U64 = UintCapability(1)
U128 = UintCapability(2)
U256 = UintCapability(4)
U512 = UintCapability(8)
U1024 = UintCapability(16)
U2048 = UintCapability(32)
U4096 = UintCapability(64)
U8192 = UintCapability(128)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Uint:
    """
    An immutable unsigned integer bound to a fixed capacity.

    Arithmetic is checked: a result outside [0, capability.max_value] raises
    OverflowError instead of wrapping around. Operands may be other Uint values
    of the same capability or plain non-negative ints.

    Attributes:
        value (int): The numeric value.
        capability (UintCapability): The capacity the value is bound to.

    Raises:
        ValueError: If value is not an int.
        OverflowError: If value does not fit in the capability.
    """
    value: int
    capability: UintCapability

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Uint value must be an integer.")
        if not self.capability.fits(self.value):
            raise OverflowError(
                f"Value does not fit in a {self.capability.bits}-bit unsigned integer."
            )

    def _operand(self, other: Union["Uint", int]) -> int:
        if isinstance(other, Uint):
            if other.capability != self.capability:
                raise ValueError(
                    f"Cannot combine a {self.capability.bits}-bit and a "
                    f"{other.capability.bits}-bit integer."
                )
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __add__(self, other: Union["Uint", int]) -> "Uint":
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return Uint(self.value + operand, self.capability)

    def __sub__(self, other: Union["Uint", int]) -> "Uint":
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return Uint(self.value - operand, self.capability)

    def div_rem(self, divisor: Union["Uint", int]) -> Tuple["Uint", "Uint"]:
        """
        Computes quotient and remainder in one step.

        Raises:
            ZeroDivisionError: If divisor is zero.
        """
        operand = self._operand(divisor)
        if operand is NotImplemented:
            raise TypeError("Divisor must be a Uint or an int.")
        if operand == 0:
            raise ZeroDivisionError("Division by zero.")
        quotient, remainder = divmod(self.value, operand)
        return Uint(quotient, self.capability), Uint(remainder, self.capability)

    def __floordiv__(self, other: Union["Uint", int]) -> "Uint":
        return self.div_rem(other)[0]

    def __mod__(self, other: Union["Uint", int]) -> "Uint":
        return self.div_rem(other)[1]

    def __eq__(self, other) -> bool:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return self.value == operand

    def __lt__(self, other) -> bool:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return self.value < operand

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def is_even(self) -> bool:
        return self.value & 1 == 0

    def is_odd(self) -> bool:
        return self.value & 1 == 1

    def bit_length(self) -> int:
        return self.value.bit_length()

    @staticmethod
    def random_bits(rng: RandomSource, bits: int, capability: UintCapability) -> "Uint":
        """
        Draws a uniform value with at most `bits` bits.

        Raises:
            CapacityError: If bits exceeds the capability.
        """
        if bits > capability.bits:
            raise CapacityError(
                f"Capacity too small: {capability.bits}-bit integers cannot hold {bits} bits."
            )
        return Uint(rng.random_bits(bits), capability)

    @staticmethod
    def random_mod(rng: RandomSource, modulus: "Uint") -> "Uint":
        """
        Draws a uniform value strictly below modulus.

        Raises:
            ValueError: If modulus is zero.
        """
        if modulus.value == 0:
            raise ValueError("Modulus must be non-zero.")
        return Uint(rng.random_below(modulus.value), modulus.capability)
