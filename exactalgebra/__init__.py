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
"""exactalgebra package for exact integer and rational arithmetic"""

from importlib.util import find_spec as module_exists
from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


avail_backends = {SYMPY}
if module_exists("flint"):
    avail_backends.add(FLINT)

from .exceptions import *
from .numbers import *


def value_of(value, denominator=None):
    """
    Natural exact value of a number.

    value_of(3) and value_of(6, 2) give the integer 3, value_of(1, 3) the
    rational 1/3. A single argument may be of any type from_number accepts.
    """
    if denominator is None:
        return from_number(value)
    return from_ints(value, denominator)
