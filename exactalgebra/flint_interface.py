#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Number theory backend for exactalgebra.

Backend: FLINT (fast) or sympy (fallback).
All FLINT-specific code is contained in this module.

Primality tests and prime factorization of arbitrary-precision integers are
delegated to python-flint's fmpz when it is installed, and to sympy otherwise.
Setting the environment variable EXACTALGEBRA_NOFLINT forces the sympy path.

Example usage:
    >>> from exactalgebra.flint_interface import is_prime, prime_factors
    >>> is_prime(2**61 - 1)
    True
    >>> prime_factors(-360)
    [(2, 3), (3, 2), (5, 1)]
"""

import logging
import os
from typing import List, Tuple

from .names import FLINT, SYMPY

LOG = logging.getLogger(__name__)

# Backend detection - ONLY place flint is imported in exactalgebra
FLINT_AVAILABLE = False
fmpz = None
if 'EXACTALGEBRA_NOFLINT' not in os.environ:
    try:
        from flint import fmpz
        FLINT_AVAILABLE = True
    except ImportError:
        fmpz = None

BACKEND = FLINT if FLINT_AVAILABLE else SYMPY
LOG.debug(f"exactalgebra number theory backend: {BACKEND}")

# Sympy fallback (only imported when needed)
_sympy_loaded = False
isprime = None
factorint = None


def _load_sympy():
    """Lazy load sympy only when needed (FLINT not available)."""
    global _sympy_loaded, isprime, factorint
    if not _sympy_loaded:
        from sympy import isprime as _isprime, factorint as _factorint
        isprime = _isprime
        factorint = _factorint
        _sympy_loaded = True


def is_prime(value: int) -> bool:
    """Deterministic primality test; values below 2 are never prime."""
    if value < 2:
        return False
    if FLINT_AVAILABLE:
        return bool(fmpz(value).is_prime())
    _load_sympy()
    return bool(isprime(value))


def prime_factors(value: int) -> List[Tuple[int, int]]:
    """Prime factorization of |value| as sorted (prime, exponent) tuples.

    0, 1 and -1 have no prime factors and yield an empty list.
    """
    value = abs(value)
    if value < 2:
        return []
    if FLINT_AVAILABLE:
        return sorted((int(p), int(e)) for p, e in fmpz(value).factor())
    _load_sympy()
    return sorted((int(p), int(e)) for p, e in factorint(value).items())
