# -*- coding: utf-8 -*-

from mockpkc.session import run_session, interactive_loop
from mockpkc.utils import InvalidModulus, NonTerminatingSearch

import numpy as np
import gmpy2
import pytest

class FakeConsole:
    """feeds scripted lines to the loop and records what it prints"""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []
        self.output = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, line):
        self.output.append(line)

def run_loop(lines, **kwargs):
    console = FakeConsole(lines)
    done = interactive_loop(console.read, console.write,
                            np.random.RandomState(0), **kwargs)
    return done, console

def test_run_session():
    ret = run_session(61, 53, 'hello', np.random.RandomState(1))
    assert ret.plaintext == 'hello'
    assert len(ret.ciphertext) == 5
    assert ret.ciphertext == [ret.public(ord(c)) for c in 'hello']
    assert ret.public.modulus == ret.private.modulus == 3233

def test_run_session_fast():
    slow = run_session(61, 53, 'x', np.random.RandomState(1))
    fast = run_session(61, 53, 'x', np.random.RandomState(1), fast=True)
    assert slow == fast

def test_run_session_errors():
    with pytest.raises(InvalidModulus):
        run_session(1, 1, 'x', np.random.RandomState(1))
    with pytest.raises(InvalidModulus):
        run_session(3, 5, 'x', np.random.RandomState(1))
    # n = 2 leaves phi = 1 so there is no exponent to pick
    with pytest.raises(NonTerminatingSearch):
        run_session(2, 1, 'x', np.random.RandomState(1))

def test_loop_quit():
    done, console = run_loop(['quit'])
    assert done == 0
    assert console.prompts == ['Enter a prime number: ']
    assert console.output == []

def test_loop_round_trip():
    done, console = run_loop(['61', '53', '  Hi  ', ' quit '])
    assert done == 1
    assert console.prompts == ['Enter a prime number: ',
                               'Enter another prime number: ',
                               'Enter a message to encrypt: ',
                               'Enter a prime number: ']
    enc, dec = console.output
    assert enc.startswith('Encrypted message: [')
    assert dec == 'Decrypted message: Hi'

def test_loop_ends_on_eof():
    done, console = run_loop(['61', '53', 'a', '17', '23', 'b'])
    assert done == 2
    assert console.output[-1] == 'Decrypted message: b'

def test_loop_reports_bad_input_and_continues():
    done, console = run_loop(['sixty-one', '53', '1', '1',
                              '61', '53', 'ok', 'quit'])
    assert done == 1
    assert console.output[0].startswith('error: ')
    assert console.output[1].startswith('error: ')
    assert console.output[-1] == 'Decrypted message: ok'

def test_loop_verbose():
    done, console = run_loop(['61', '53', 'A', 'quit'], verbose=True)
    assert done == 1
    assert console.output[0] == 'n = 3233'
    assert console.output[1].startswith('public key: (3233, ')
    assert console.output[2].startswith('private key: (3233, ')

def test_loop_large_primes_fast():
    p = int(gmpy2.next_prime(2 ** 1023 + 12345))
    q = int(gmpy2.next_prime(2 ** 1023 + 99999))
    done, console = run_loop([str(p), str(q), 'hi', 'quit'], fast=True)
    assert done == 1
    assert console.output[-1] == 'Decrypted message: hi'
