import math

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from crypto_primality import U512, SeededRandomSource, generate_probable_prime, is_composite

E = 65537


def _rsa_primes(rng, bits=512):
    """Generates two distinct full-length primes coprime to e, as an RSA key generator would."""
    primes = []
    while len(primes) < 2:
        p = int(generate_probable_prime(bits, 10, rng, capability=U512))
        if p.bit_length() == bits and math.gcd(p - 1, E) == 1 and p not in primes:
            primes.append(p)
    return primes


class TestCryptographyInteroperability:
    """
    Checks the generated primes with the 'cryptography' library, which
    validates RSA private numbers through OpenSSL (including a primality
    check of p and q) when the key is loaded.
    """

    @pytest.fixture(scope="class")
    def private_key(self):
        p, q = _rsa_primes(SeededRandomSource(seed=2024))
        n = p * q
        d = pow(E, -1, (p - 1) * (q - 1))
        priv_nums = rsa.RSAPrivateNumbers(
            p=p, q=q, d=d,
            dmp1=d % (p - 1),
            dmq1=d % (q - 1),
            iqmp=pow(q, -1, p),
            public_numbers=rsa.RSAPublicNumbers(e=E, n=n),
        )
        return priv_nums.private_key()

    def test_key_has_expected_size(self, private_key):
        assert private_key.key_size in (1023, 1024)

    def test_sign_here_verify_there(self, private_key):
        """Signs with the key built from our primes and verifies with the public key."""
        message = b"probable primes"
        signature = private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())
        private_key.public_key().verify(signature, message, padding.PKCS1v15(), hashes.SHA256())

    def test_reference_primes_pass_our_test(self):
        """Primes generated by the reference library are not composite for our test."""
        reference_key = rsa.generate_private_key(public_exponent=E, key_size=1024)
        numbers = reference_key.private_numbers()
        rng = SeededRandomSource(seed=7)
        for prime in (numbers.p, numbers.q):
            assert is_composite(U512.from_int(prime), 20, rng).is_probably_prime

    def test_reference_modulus_is_composite(self):
        """The reference library's modulus is composite for our test."""
        reference_key = rsa.generate_private_key(public_exponent=E, key_size=1024)
        n = reference_key.public_key().public_numbers().n
        assert is_composite(U512.wide.from_int(n), 20, SeededRandomSource(seed=8)).is_composite
