#!/usr/bin/env python3
"""
Build an odd-only sieve and print a query report.

Usage:
    python run_sieve.py
    python run_sieve.py --config config/custom.yaml
    python run_sieve.py --upper-bound 101 --show-primes
"""

import argparse
import time

from oddsieve.report import load_config, run_report


def main():
    parser = argparse.ArgumentParser(description='Build a prime sieve and run queries')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('--upper-bound', type=int, default=None,
                        help='Override upper_bound from the config')
    parser.add_argument('--show-primes', action='store_true',
                        help='Print every prime covered by the sieve')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.upper_bound is not None:
        config['upper_bound'] = args.upper_bound
    if args.show_primes:
        config['show_primes'] = True

    print("=" * 60)
    print("Odd-only Sieve of Eratosthenes")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  upper_bound = {config['upper_bound']:,}")
    print(f"  nth_primes = {config['nth_primes']}")
    print(f"  next_primes = {config['next_primes']}")
    print(f"  primality_checks = {config['primality_checks']}")
    print()

    total_start = time.time()
    run_report(config)

    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {time.time() - total_start:.1f}s")


if __name__ == '__main__':
    main()
