# -*- coding: utf-8 -*-

"""one key-generation/encrypt/decrypt round, and the console loop around it"""

from .utils import CipherError
from .algo.asym import RSA
from .algo.numt import DEFAULT_MAX_ATTEMPTS

import collections

QUIT_TOKEN = 'quit'

SessionResult = collections.namedtuple(
    'SessionResult', ['public', 'private', 'ciphertext', 'plaintext'])

def run_session(p, q, message, rng=None, *, fast=False,
                max_attempts=DEFAULT_MAX_ATTEMPTS):
    """derive a key pair from p, q then encrypt and decrypt message

    :rtype: :class:`SessionResult`; plaintext is the decrypted str
    """
    public, private = RSA.make_key_pair(
        p, q, rng, fast=fast, max_attempts=max_attempts)
    cipher = RSA.encrypt(message, public)
    plain = RSA.decrypt(cipher, private)
    return SessionResult(public, private, cipher, plain.to_str())

def interactive_loop(read=input, write=print, rng=None, *, fast=False,
                     max_attempts=DEFAULT_MAX_ATTEMPTS, verbose=False):
    """prompt for primes and a message until the user types quit

    Bad input and cipher errors are reported and the loop starts over.

    :param read: callable taking a prompt and returning a line; EOFError ends
        the loop
    :param write: callable taking a line to print
    :return: number of sessions that completed
    """
    done = 0
    while True:
        try:
            p = read('Enter a prime number: ').strip()
            if p == QUIT_TOKEN:
                break
            q = read('Enter another prime number: ').strip()
            p, q = int(p), int(q)

            public, private = RSA.make_key_pair(
                p, q, rng, fast=fast, max_attempts=max_attempts)
            if verbose:
                write('n = {}'.format(public.modulus))
                write('public key: {}'.format(tuple(public)))
                write('private key: {}'.format(tuple(private)))

            message = read('Enter a message to encrypt: ').strip()
            cipher = RSA.encrypt(message, public)
            write('Encrypted message: {}'.format(cipher))
            plain = RSA.decrypt(cipher, private)
            write('Decrypted message: {}'.format(
                plain.to_bytes().decode('utf-8', 'replace')))
            done += 1
        except EOFError:
            break
        except (ValueError, CipherError) as exc:
            write('error: {}'.format(exc))
    return done
