from crypto_primality.arith.uint import Uint


class MontyParams:
    """
    Precomputed parameters for Montgomery arithmetic modulo an odd integer.

    Montgomery arithmetic represents numbers in a special form that allows
    efficient modular multiplication without expensive division operations.
    The radix is R = 2^k where k is the bit capacity of the modulus, so every
    product of two reduced values fits in the doubled-width capability.

    Args:
        modulus (Uint): The modulus (Montgomery multiplication requires odd modulus).

    Raises:
        ValueError: If modulus is even.
    """

    def __init__(self, modulus: Uint):
        if modulus.is_even():
            raise ValueError("Montgomery arithmetic requires an odd modulus.")

        self.capability = modulus.capability
        self.modulus = modulus.value

        self.k = self.capability.bits
        self.R = 1 << self.k
        self._mask = self.R - 1
        self._wide_bits = self.capability.wide.bits

        # n' such that n * n' = -1 (mod R)
        self.n_prime = self.R - pow(self.modulus, -1, self.R)

        self.one_mont = self.R % self.modulus
        self._r_squared = self.R * self.R % self.modulus

    def reduce(self, t: int) -> int:
        """
           Montgomery reduction: computes t/R mod n.

           Args:
               t (int): A double-width value below n * R.

           Returns:
               int: The reduced value, below n.

           Raises:
               OverflowError: If t does not fit in the double-width capability.
       """
        if t.bit_length() > self._wide_bits:
            raise OverflowError("Intermediate product exceeds the double-width capability.")

        m = ((t & self._mask) * self.n_prime) & self._mask
        u = (t + m * self.modulus) >> self.k

        if u >= self.modulus:
            u = u - self.modulus
        return u

    def to_mont(self, x: int) -> int:
        return self.reduce(x * self._r_squared)

    def from_mont(self, x_mont: int) -> int:
        return self.reduce(x_mont)

    def multiply(self, a_mont: int, b_mont: int) -> int:
        return self.reduce(a_mont * b_mont)


class MontyForm:
    """
    An integer modulo n held in Montgomery form.

    Instances are immutable; every operation returns a new MontyForm bound to
    the same parameters.

    Args:
        value (Uint): The value to convert; it is reduced modulo n.
        params (MontyParams): The Montgomery parameters of the modulus.

    Raises:
        ValueError: If value and params use different capabilities.
    """

    __slots__ = ("params", "_mont")

    def __init__(self, value: Uint, params: MontyParams):
        if value.capability != params.capability:
            raise ValueError("Value and modulus must share the same capability.")
        self.params = params
        self._mont = params.to_mont(value.value)

    @classmethod
    def _from_mont(cls, mont: int, params: MontyParams) -> "MontyForm":
        form = cls.__new__(cls)
        form.params = params
        form._mont = mont
        return form

    def __eq__(self, other) -> bool:
        if not isinstance(other, MontyForm):
            return NotImplemented
        return self.params.modulus == other.params.modulus and self._mont == other._mont

    def __hash__(self) -> int:
        return hash((self.params.modulus, self._mont))

    def __repr__(self) -> str:
        return f"MontyForm({self.retrieve()} mod {self.params.modulus})"

    def mul(self, other: "MontyForm") -> "MontyForm":
        return MontyForm._from_mont(self.params.multiply(self._mont, other._mont), self.params)

    def square(self) -> "MontyForm":
        return MontyForm._from_mont(self.params.multiply(self._mont, self._mont), self.params)

    def pow(self, exponent: Uint) -> "MontyForm":
        """
        Raises this value to a non-negative exponent.

        Args:
            exponent (Uint): The exponent.

        Returns:
            MontyForm: self^exponent mod n.
        """
        params = self.params
        exp = int(exponent)
        result_mont = params.one_mont

        # Multiply-then-square from MSB to LSB
        for i in range(exp.bit_length() - 1, -1, -1):
            if (exp >> i) & 1:
                result_mont = params.multiply(result_mont, self._mont)

            if i > 0:
                result_mont = params.multiply(result_mont, result_mont)

        return MontyForm._from_mont(result_mont, params)

    def retrieve(self) -> Uint:
        """Converts back from Montgomery form."""
        return Uint(self.params.from_mont(self._mont), self.params.capability)
