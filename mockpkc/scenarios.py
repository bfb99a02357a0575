# -*- coding: utf-8 -*-

from .utils import scenario, assert_eq, NonTerminatingSearch, InvalidModulus
from .algo.numt import (totient, semiprime_totient, random_coprime,
                        compute_inverse, invmod, gcd)
from .algo.asym import RSA
from .session import run_session

import numpy as np

SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53,
                59, 61, 67, 71]

def expect_error(exc_type, func, *args, **kwargs):
    try:
        func(*args, **kwargs)
    except exc_type:
        return
    raise AssertionError('{} not raised by {}'.format(
        exc_type.__name__, func.__name__))

@scenario
def sc01_textbook():
    """p=61, q=53, e=17 from the usual worked example"""
    n = 61 * 53
    phi, _ = totient(n)
    assert_eq(phi, 3120)
    d = compute_inverse(17, phi)
    assert_eq(d, 2753)

    public, private = RSA.Key(n, 17), RSA.Key(n, d)
    cipher = RSA.encrypt('A', public)
    assert_eq(cipher, [2790])
    assert_eq(RSA.decrypt(cipher, private).to_str(), 'A')

@scenario
def sc02_totient_of_semiprimes():
    for i, p in enumerate(SMALL_PRIMES):
        for q in SMALL_PRIMES[i+1:]:
            cnt, coprimes = totient(p * q)
            assert_eq(cnt, (p - 1) * (q - 1), (p, q))
            assert_eq(cnt, len(coprimes))
            assert all(gcd(k, p * q) == 1 for k in coprimes)
    assert_eq(totient(0), (0, []))
    assert_eq(totient(1), (0, []))

@scenario
def sc03_full_symbol_range():
    rng = np.random.RandomState(7)
    public, private = RSA.make_key_pair(17, 23, rng)
    n = public.modulus
    for m in range(min(n, 256)):
        assert_eq(private(public(m)), m)

@scenario
def sc04_fast_matches_brute_force():
    rng = np.random.RandomState(42)
    for p, q in [(61, 53), (11, 13), (47, 59)]:
        phi, _ = totient(p * q)
        assert_eq(phi, semiprime_totient(p, q))
        e = random_coprime(phi, rng)
        assert_eq(compute_inverse(e, phi), invmod(e, phi))

@scenario
def sc05_session():
    msg = 'hello, world'
    ret = run_session(61, 53, msg, np.random.RandomState(1))
    assert_eq(ret.plaintext, msg)
    assert_eq(len(ret.ciphertext), len(msg))
    return ret.ciphertext

@scenario
def sc06_failures():
    rng = np.random.RandomState(0)
    expect_error(NonTerminatingSearch, random_coprime, 0, rng)
    expect_error(NonTerminatingSearch, random_coprime, 1, rng)
    expect_error(NonTerminatingSearch, random_coprime, 2, rng,
                 max_attempts=50)
    expect_error(NonTerminatingSearch, compute_inverse, 6, 3120)
    expect_error(InvalidModulus, RSA.make_key_pair, 1, 1, rng)
    expect_error(InvalidModulus, RSA.encrypt, 'z', RSA.Key(15, 3))
