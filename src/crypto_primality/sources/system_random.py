import secrets

from crypto_primality.core import RandomSource


class SystemRandomSource(RandomSource):
    """
    Random source backed by the operating system CSPRNG.

    The underlying generator is thread-safe, so one instance may be shared
    between concurrent searches.
    """

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Number of bytes cannot be negative.")
        return secrets.token_bytes(n)

    def __repr__(self) -> str:
        return "SystemRandomSource()"
