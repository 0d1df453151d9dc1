"""
Miller-Rabin compositeness test and probable-prime generation.

`is_composite` tests whether a candidate is composite; if it is not found to be
composite it is likely, though not guaranteed, to be prime, with
P[composite] < (1/4)^t after t trials.

The test returns as soon as a witness proves compositeness and skips the rest
of the squaring ladder once a witness passes. Its running time therefore
depends on the candidate, which is fine while searching for a prime but makes
it unsuitable for values that must stay secret.

References:
    Gallier, Jean, and Jocelyn Quaintance. "Notes on Primality Testing And Public
    Key Cryptography Part 1: Randomized Algorithms Miller-Rabin and
    Solovay-Strassen Tests."
    Conrad, Keith. "The Miller-Rabin Test."
"""
import logging
import threading
from typing import Optional

from crypto_primality.arith import MontyForm, MontyParams, Uint, UintCapability
from crypto_primality.core import (
    CapacityError,
    RandomSource,
    SearchCancelledError,
    SearchExhaustedError,
    Verdict,
)

logger = logging.getLogger(__name__)


def _check_trials(t: int) -> None:
    if isinstance(t, bool) or not isinstance(t, int):
        raise ValueError("Number of trials (t) must be an integer.")
    if t <= 0:
        raise ValueError("Number of trials (t) must be positive.")


def is_composite(p: Uint, t: int, rng: RandomSource) -> Verdict:
    """
    Miller-Rabin composite test.

    Args:
        p (Uint): The candidate prime.
        t (int): The number of independent trials; bounds P[composite] < (1/4)^t.
        rng (RandomSource): Source used to pick each witness a in [2, p-2].

    Returns:
        Verdict: COMPOSITE if a witness proved p composite, PROBABLY_PRIME otherwise.

    Raises:
        ValueError: If t is not a positive integer. Checked before any randomness
            is consumed.

    Note:
        Choosing t close to p re-tests the same witnesses without lowering the
        probability of a false positive.
    """
    _check_trials(t)

    if p == 2 or p == 3:
        return Verdict.PROBABLY_PRIME

    # 0 and 1 are not prime; every other even number has the factor 2
    if p < 2 or p.is_even():
        return Verdict.COMPOSITE

    p_minus_1 = p - 1
    p_minus_3 = p - 3

    # Write p-1 as 2^s * q where q is odd
    s = 0
    q = p_minus_1
    while q.is_even():
        q = q // 2
        s += 1

    params = MontyParams(p)
    unity = MontyForm(p.capability.one, params)
    minus_one = MontyForm(p_minus_1, params)

    for _ in range(t):
        # a is uniform in [2, p-2]; p >= 5 so the modulus is non-zero
        a = Uint.random_mod(rng, p_minus_3) + 2

        x = MontyForm(a, params).pow(q)
        if x == unity or x == minus_one:
            continue

        # Square x repeatedly s-1 times, looking for p-1
        for _ in range(s - 1):
            x = x.square()
            if x == minus_one:
                break
            if x == unity:
                # Non-trivial square root of 1
                return Verdict.COMPOSITE
        else:
            return Verdict.COMPOSITE

    return Verdict.PROBABLY_PRIME


def _random_odd(rng: RandomSource, bits: int, capability: UintCapability) -> Uint:
    candidate = capability.zero
    while candidate.is_even():
        candidate = Uint.random_bits(rng, bits, capability)
    return candidate


def generate_probable_prime(
        bits: int,
        t: int,
        rng: RandomSource,
        *,
        capability: UintCapability,
        max_candidates: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
) -> Uint:
    """
    Generate a probable prime of at most `bits` bits, stored with the given capability.

    Draws a random odd candidate and steps it by two until one survives all t
    trials of `is_composite`. A candidate never grows past `bits` bits: when the
    next step would, a fresh odd candidate is drawn instead.

    The search has no bound by default. Callers needing one pass `max_candidates`
    or a `cancel` event that is checked before each candidate.

    Args:
        bits (int): The maximum bit length of the prime.
        t (int): The number of Miller-Rabin trials per candidate.
        rng (RandomSource): The source of randomness.
        capability (UintCapability): The capacity of the returned integer.
        max_candidates (int, optional): Maximum number of candidates to test.
        cancel (threading.Event, optional): Aborts the search once set.

    Returns:
        Uint: An odd probable prime with bit length <= bits.

    Raises:
        CapacityError: If bits exceeds the capability.
        ValueError: If bits < 2, t is not positive or max_candidates is not positive.
        SearchExhaustedError: If max_candidates candidates were composite.
        SearchCancelledError: If cancel was set before a prime was found.
    """
    if bits > capability.bits:
        raise CapacityError(
            f"Capacity too small: {capability.bits}-bit integers cannot hold {bits} bits."
        )
    if bits < 2:
        raise ValueError("Number of bits must be at least 2.")
    _check_trials(t)
    if max_candidates is not None and max_candidates <= 0:
        raise ValueError("Maximum number of candidates must be positive.")

    limit = (1 << bits) - 1
    p = _random_odd(rng, bits, capability)

    tested = 0
    while True:
        if cancel is not None and cancel.is_set():
            raise SearchCancelledError(
                f"Search for a {bits} bits prime cancelled after {tested} candidates."
            )
        if max_candidates is not None and tested >= max_candidates:
            raise SearchExhaustedError(
                f"Unable to generate a {bits} bits prime after {max_candidates} candidates."
            )

        tested += 1
        if is_composite(p, t, rng).is_probably_prime:
            logger.info("Found a %d bits probable prime after %d candidates", bits, tested)
            return p

        if p.value > limit - 2:
            logger.debug("Candidate reached the %d bits limit, drawing a new one", bits)
            p = _random_odd(rng, bits, capability)
        else:
            p = p + 2
