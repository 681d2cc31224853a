"""
Query report driven by a yaml config.

Used by run_sieve.py. Builds one sieve, then runs every configured query
against it and prints the results.
"""

import time
import yaml
from pathlib import Path
from typing import Any, Dict

from .errors import SieveError
from .factorization import prime_factors_naive
from .queries import count_primes, enumerate_primes, find_next_prime, find_nth_prime, is_prime
from .sieve import sieve_upto

DEFAULTS = {
    'nth_primes': [],
    'next_primes': [],
    'primality_checks': [],
    'factorize': [],
    'show_primes': False,
}


def load_config(path) -> Dict[str, Any]:
    """
    Load a report config, filling optional keys with DEFAULTS.

    Raises
    ------
    KeyError
        If upper_bound is missing.
    """
    with open(Path(path)) as f:
        config = yaml.safe_load(f) or {}

    if 'upper_bound' not in config:
        raise KeyError(f"{path}: missing required key 'upper_bound'")

    return {**DEFAULTS, **config}


def _run_query(func, *args):
    """Run one query; a SieveError is reported as a string result."""
    try:
        return func(*args)
    except SieveError as e:
        return f"error: {e}"


def run_report(config: Dict[str, Any], verbose: bool = True) -> Dict[str, Any]:
    """
    Build the sieve described by config and answer its queries.

    Parameters
    ----------
    config : dict
        As returned by load_config.
    verbose : bool
        Print the report while running.

    Returns
    -------
    dict
        Keys: max_covered, prime_count, build_seconds, nth_primes,
        next_primes, primality_checks, factorize (each a value → answer
        dict), and primes when show_primes is set.
    """
    say = print if verbose else (lambda *a, **k: None)

    say("-" * 60)
    say("Building sieve")
    say("-" * 60)
    start = time.time()
    storage, max_covered = sieve_upto(config['upper_bound'], verbose=verbose)
    build_seconds = time.time() - start
    say(f"   Completed in {build_seconds:.2f}s")
    say()

    results = {
        'max_covered': max_covered,
        'prime_count': count_primes(storage),
        'build_seconds': build_seconds,
        'nth_primes': {},
        'next_primes': {},
        'primality_checks': {},
        'factorize': {},
    }
    say(f"  {results['prime_count']:,} primes <= {max_covered:,}")
    say()

    sections = [
        ('nth_primes', 'n-th prime', find_nth_prime),
        ('next_primes', 'Next prime', find_next_prime),
        ('primality_checks', 'Primality', is_prime),
    ]
    for key, title, func in sections:
        if not config[key]:
            continue
        say(f"{title}:")
        for value in config[key]:
            answer = _run_query(func, value, storage)
            results[key][value] = answer
            say(f"  {value:>12,} → {answer}")
        say()

    if config['factorize']:
        say("Factorization (trial division):")
        for value in config['factorize']:
            factors = prime_factors_naive(value)
            results['factorize'][value] = factors
            say(f"  {value:>12,} = {' * '.join(map(str, factors)) or '-'}")
        say()

    if config['show_primes']:
        primes = enumerate_primes(storage)
        results['primes'] = primes.tolist()
        say(f"Primes: {' '.join(map(str, results['primes']))}")
        say()

    return results
