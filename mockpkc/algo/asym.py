# -*- coding: utf-8 -*-

"""textbook RSA over 8-bit symbols, one modular exponentiation per symbol"""

from ..utils import InvalidModulus
from ..bytearr import Bytearr
from .numt import (totient, semiprime_totient, random_coprime,
                   compute_inverse, invmod, powmod, DEFAULT_MAX_ATTEMPTS)

import numpy as np

class RSA:
    class Key:
        """public (n, e) or private (n, d) key; calling it applies
        x ** exponent % modulus"""

        def __init__(self, modulus, exponent):
            self._n = modulus
            self._e = exponent

        @property
        def modulus(self):
            return self._n

        @property
        def exponent(self):
            return self._e

        def __call__(self, x):
            return powmod(x, self._e, self._n)

        def __eq__(self, rhs):
            return (isinstance(rhs, RSA.Key) and
                    (self._n, self._e) == (rhs._n, rhs._e))

        def __hash__(self):
            return hash((self._n, self._e))

        def __iter__(self):
            return iter((self._n, self._e))

        def __repr__(self):
            return 'Key(n={}, exponent={})'.format(self._n, self._e)

    @classmethod
    def make_key_pair(cls, p, q, rng=None, *, fast=False,
                      max_attempts=DEFAULT_MAX_ATTEMPTS):
        """derive (public, private) keys from two primes

        Primality is not checked; non-prime factors give keys that do not
        round-trip.

        :param rng: random source for the public exponent, defaults to the
            global :mod:`numpy.random` state
        :param fast: use the closed-form totient of p * q and the extended
            Euclidean inverse instead of brute-force scans
        """
        if rng is None:
            rng = np.random
        if p < 1 or q < 1 or p * q <= 1:
            raise InvalidModulus(
                'can not build a modulus from {} and {}'.format(p, q))

        n = p * q
        if fast:
            phi = semiprime_totient(p, q)
        else:
            phi, _ = totient(n)
        e = random_coprime(phi, rng, max_attempts)
        if fast:
            d = invmod(e, phi)
        else:
            d = compute_inverse(e, phi)
        return cls.Key(n, e), cls.Key(n, d)

    @staticmethod
    def encrypt(message, public):
        """encrypt each 8-bit symbol of the message separately

        :param message: str (utf-8 encoded), bytes, or :class:`Bytearr`
        :type public: :class:`RSA.Key`
        :return: list of int, one per symbol
        """
        n = public.modulus
        ret = []
        for m in Bytearr(message, allow_borrow=True).symbols():
            if m >= n:
                raise InvalidModulus(
                    'modulus {} is too small for symbol value {}'.format(
                        n, m))
            ret.append(public(m))
        return ret

    @staticmethod
    def decrypt(cipher, private):
        """decrypt a list of ints back to 8-bit symbols

        Each decrypted value must fit in 8 bits, which holds when the cipher
        was produced by the matching public key.

        :raise NarrowingOverflow: if some decrypted value exceeds 255
        :rtype: :class:`Bytearr`
        """
        return Bytearr.from_symbols(private(int(c)) for c in cipher)
