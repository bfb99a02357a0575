# -*- coding: utf-8 -*-

import pkgutil
import importlib
import os

import numpy as np

SRC_ROOT = os.path.join(os.path.dirname(__file__), os.path.pardir)

_all_scenarios = []

def scenario(func):
    """decorator to mark a function as a self-check scenario"""
    _all_scenarios.append(func)
    return func

def discover_scenarios():
    for loader, module_name, is_pkg in pkgutil.walk_packages(
            [SRC_ROOT], __name__[:__name__.rfind('.')+1]):
        if not is_pkg:
            importlib.import_module(module_name)
    _all_scenarios.sort(key=lambda x: x.__name__)
    return _all_scenarios

def assert_eq(a, b, msg=None):
    check = lambda a, b: a == b
    if isinstance(a, np.ndarray):
        assert (isinstance(b, np.ndarray) and
                a.dtype == b.dtype and a.shape == b.shape), (a, b)

        check = lambda a, b: np.all(a == b)

    if msg is not None:
        msg = '; {}'.format(msg)
    else:
        msg = ''
    assert check(a, b), 'assert_eq failed: a={!r} b={!r}{}'.format(a, b, msg)

class CipherError(RuntimeError):
    """exception class for cipher algorithms"""

class InvalidModulus(CipherError):
    """modulus is degenerate or too small for the plaintext symbols"""

class NonTerminatingSearch(CipherError):
    """a key-derivation search has no solution or ran out of attempts"""

class NarrowingOverflow(CipherError):
    """a decrypted value does not fit in one 8-bit symbol"""
