from abc import ABC, abstractmethod


class RandomSource(ABC):
    """
    Abstract interface for the randomness consumed by the primality routines.

    This contract only requires implementing `random_bytes`.
    It provides concrete implementations for drawing bounded integers,
    as both are derived from a stream of uniform bytes.

    A source is a mutable resource: it is borrowed for the duration of a call
    and must not be used by two threads at once unless the implementation
    synchronizes internally.
    """

    @abstractmethod
    def random_bytes(self, n: int) -> bytes:
        """
        Returns n uniformly random bytes.

        Args:
            n (int): The number of bytes to return.

        Returns:
            bytes: A bytes object of length n.
        """
        pass

    def random_bits(self, bits: int) -> int:
        """
        Draws an integer uniformly from [0, 2^bits).

        Args:
            bits (int): The maximum bit length of the result.

        Returns:
            int: A non-negative integer with at most `bits` bits.

        Raises:
            ValueError: If bits is negative.
        """
        if bits < 0:
            raise ValueError("Number of bits cannot be negative.")
        if bits == 0:
            return 0

        num_bytes = (bits + 7) // 8
        value = int.from_bytes(self.random_bytes(num_bytes), "big")
        # Drop the surplus low-order bits of the last byte
        return value >> (num_bytes * 8 - bits)

    def random_below(self, modulus: int) -> int:
        """
        Draws an integer uniformly from [0, modulus).

        Uses rejection sampling over the bit length of modulus - 1, so each
        attempt succeeds with probability greater than 1/2.

        Args:
            modulus (int): The exclusive upper bound.

        Returns:
            int: A uniformly distributed integer below modulus.

        Raises:
            ValueError: If modulus is not positive.
        """
        if modulus <= 0:
            raise ValueError("Modulus must be positive.")

        bits = (modulus - 1).bit_length()
        while True:
            value = self.random_bits(bits)
            if value < modulus:
                return value
