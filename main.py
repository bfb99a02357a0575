#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from mockpkc.utils import discover_scenarios
from mockpkc.session import interactive_loop
from mockpkc.algo.numt import DEFAULT_MAX_ATTEMPTS

import argparse

import numpy as np

def attempts_arg(val):
    """argparse type for --max-attempts: a non-negative int"""
    val = int(val)
    if val < 0:
        raise argparse.ArgumentTypeError(
            'must be >= 0, got {}'.format(val))
    return val

def run_checks(names):
    all_sc = discover_scenarios()
    sc = all_sc
    if names:
        all_sc = {i.__name__: i for i in all_sc}
        sc = [all_sc[i] for i in names]

    for i in sc:
        print('Run {}'.format(i.__name__), end='', flush=True)
        ret = i()
        if ret:
            print(': ', end='')
            print(repr(ret), end='')
        print()

def main():
    parser = argparse.ArgumentParser(
        description='mock public key cryptography: derive a textbook RSA key '
        'pair from two primes, then encrypt and decrypt a message')
    parser.add_argument('--check', nargs='*', metavar='NAME',
                        help='run self-check scenarios and exit; leave '
                        'empty for all scenarios')
    parser.add_argument('--seed', type=int,
                        help='seed of the random source for the public '
                        'exponent')
    parser.add_argument('--fast', action='store_true',
                        help='use (p-1)*(q-1) and the extended Euclidean '
                        'inverse instead of brute-force scans')
    parser.add_argument('--max-attempts', type=attempts_arg,
                        default=DEFAULT_MAX_ATTEMPTS,
                        help='draws allowed when picking the public exponent;'
                        ' 0 for no limit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the derived keys')
    args = parser.parse_args()

    if args.check is not None:
        run_checks(args.check)
        return

    rng = np.random
    if args.seed is not None:
        rng = np.random.RandomState(args.seed)

    write = lambda s: print(s, flush=True)
    interactive_loop(input, write, rng, fast=args.fast,
                     max_attempts=args.max_attempts or None,
                     verbose=args.verbose)

if __name__ == '__main__':
    main()
