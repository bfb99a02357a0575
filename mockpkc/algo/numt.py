# -*- coding: utf-8 -*-

"""number theory helper routines

The key-derivation helpers here are deliberately brute force: :func:`totient`
scans every candidate below n and :func:`compute_inverse` scans every
candidate below phi. :func:`semiprime_totient` and :func:`invmod` are the
closed-form/extended-Euclid counterparts used when ``fast`` key derivation is
requested.
"""

from ..utils import NonTerminatingSearch

import numpy as np
import gmpy2

DEFAULT_MAX_ATTEMPTS = 100000
"""default number of draws :func:`random_coprime` makes before giving up"""

def powmod(a, p, m):
    """compute a ** p % m"""
    return pow(a, p, m)

def bytes2int(bv, endian='big'):
    """convert bytes to large int"""
    return int.from_bytes(bv, endian)

def large_randint(n, rng=np.random):
    """generate randint(n) for large n values

    :param rng: :class:`numpy.random.RandomState` or the :mod:`numpy.random`
        module itself
    """
    assert isinstance(n, int) and n > 0, n
    if n < (1 << 62):
        return int(rng.randint(n))
    nbytes = n.bit_length() // 8 + 1
    return bytes2int(rng.bytes(nbytes)) % n

def gcd(a, b):
    """Euclidean algorithm: gcd(a, b) = gcd(b % a, a), gcd(0, b) = b"""
    while a:
        a, b = b % a, a
    return b

def totient(n):
    """count the integers in [1, n) that are coprime to n by exhaustive scan

    Every candidate costs a gcd, so this is only usable for small n.

    :return: (count, coprimes) where coprimes is in ascending order
    """
    assert isinstance(n, int), n
    coprimes = [k for k in range(1, n) if gcd(k, n) == 1]
    return len(coprimes), coprimes

def semiprime_totient(p, q):
    """closed form totient of p * q, valid only when p, q are primes"""
    if p == q:
        return p * (p - 1)
    return (p - 1) * (q - 1)

def random_coprime(phi, rng=np.random, max_attempts=DEFAULT_MAX_ATTEMPTS):
    """draw a random e in (1, phi) with gcd(e, phi) == 1

    Candidates are drawn uniformly from [1, phi) and rejected until one is
    coprime to phi and not 1. With phi == 2 the only candidate is 1, so the
    loop can never succeed; with ``max_attempts=None`` it then runs forever.

    :param max_attempts: number of draws before raising
        :class:`NonTerminatingSearch`; None for an unbounded loop
    """
    assert isinstance(phi, int), phi
    if phi <= 1:
        raise NonTerminatingSearch(
            'no candidate exponent in [1, {})'.format(phi))

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        e = 1 + large_randint(phi - 1, rng)
        if e != 1 and gcd(e, phi) == 1:
            return e

    raise NonTerminatingSearch(
        'no exponent coprime to {} found in {} attempts'.format(
            phi, max_attempts))

def compute_inverse(e, phi):
    """find the least d >= 0 with d * e % phi == 1 by linear scan

    A solution, if any, lies below phi, so the scan stops there.
    """
    if phi <= 1 or gcd(e % phi, phi) != 1:
        raise NonTerminatingSearch(
            '{} has no inverse modulo {}'.format(e, phi))
    for d in range(phi):
        if (d * e) % phi == 1:
            return d
    raise NonTerminatingSearch(
        '{} has no inverse modulo {}'.format(e, phi))

def egcd(a, b):
    """extended gcd

    :return: g, x, y such that x * a + y * b == g and x > 0
    """
    g, x, y = map(int, gmpy2.gcdext(a, b))
    x %= (b // g)
    y = (g - x * a) // b
    return g, x, y

def invmod(a, m, b=1):
    """solve x such that a*x === b (mod m) and return the least positive x"""
    if m <= 1:
        raise NonTerminatingSearch(
            '{} has no inverse modulo {}'.format(a, m))
    b %= m
    g, x, _ = egcd(a, m)
    k, r = divmod(b, g)
    if r:
        raise NonTerminatingSearch(
            '{} * x == {} has no solution modulo {}'.format(a, b, m))
    if k != 1:
        x *= k
    return x % m
