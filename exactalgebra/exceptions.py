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
"""Errors raised by exactalgebra

Every class derives from the built-in exception a caller would already catch
for the same situation, so ``except ArithmeticError`` or ``except ValueError``
keep working.
"""


class UndefinedOperationError(ArithmeticError):
    """The requested operation has no mathematical value (e.g. 0^0)"""


class DivisionByZeroError(UndefinedOperationError, ZeroDivisionError):
    """Division, inversion or a denominator of zero"""


class RepresentationOverflowError(OverflowError):
    """A value does not fit the encoding that was explicitly requested"""


class DisallowedNarrowingError(RepresentationOverflowError):
    """Exact narrowing to a fixed-width integer would lose information"""

    def __init__(self, source, target, value=None):
        self.source = source
        self.target = target
        self.value = value
        msg = f"Narrowing {source} to {target} would lose information"
        if value is not None:
            msg += f": {value}"
        super().__init__(msg)


class InvalidArgumentError(ValueError):
    """An argument is missing or outside of its permitted range"""


def confirm_not_none(value, name='value'):
    """Raise InvalidArgumentError if value is None, otherwise return it"""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def check_radix(radix) -> int:
    """Return a valid radix, 10 for None; raise InvalidArgumentError otherwise"""
    if radix is None:
        return 10
    if not isinstance(radix, int) or isinstance(radix, bool) or not 2 <= radix <= 36:
        raise InvalidArgumentError(f"radix must be an integer in [2, 36], got {radix}")
    return radix
