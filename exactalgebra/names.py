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
"""Static strings used in the exactalgebra package

    Boundary policies for word-size checks

        SHORTENED = 'shortened' # signed range without the negative extreme

        DEFAULT = 'default' # full signed range

        EXTENDED = 'extended' # signed range plus the positive twin of the negative extreme

        UNSIGNED = 'unsigned'

    Number ranks

        INTEGER = 'integer'

        RATIONAL = 'rational'

    Sigmagnum classes

        NEGATIVE_SUB_MINUS_ONE = 'negative_sub_minus_one'

        NEGATIVE_ONE = 'negative_one'

        NEGATIVE_SUP_MINUS_ONE = 'negative_sup_minus_one'

        ZERO = 'zero'

        POSITIVE_SUB_ONE = 'positive_sub_one'

        POSITIVE_ONE = 'positive_one'

        POSITIVE_SUP_ONE = 'positive_sup_one'

    Factory parameters

        WHOLE = 'whole'

        NUMERATOR = 'numerator'

        DENOMINATOR = 'denominator'

    Backends

        FLINT = 'flint'

        SYMPY = 'sympy'
"""

# Boundary policies
SHORTENED = 'shortened'
DEFAULT = 'default'
EXTENDED = 'extended'
UNSIGNED = 'unsigned'
BOUNDARY_POLICIES = (SHORTENED, DEFAULT, EXTENDED, UNSIGNED)

# Number ranks
INTEGER = 'integer'
RATIONAL = 'rational'

# Sigmagnum classes, ordered from most negative to most positive
NEGATIVE_SUB_MINUS_ONE = 'negative_sub_minus_one'
NEGATIVE_ONE = 'negative_one'
NEGATIVE_SUP_MINUS_ONE = 'negative_sup_minus_one'
ZERO = 'zero'
POSITIVE_SUB_ONE = 'positive_sub_one'
POSITIVE_ONE = 'positive_one'
POSITIVE_SUP_ONE = 'positive_sup_one'
SIGMAGNUMS = (NEGATIVE_SUB_MINUS_ONE, NEGATIVE_ONE, NEGATIVE_SUP_MINUS_ONE, ZERO, POSITIVE_SUB_ONE, POSITIVE_ONE,
              POSITIVE_SUP_ONE)

# Factory parameters
WHOLE = 'whole'
NUMERATOR = 'numerator'
DENOMINATOR = 'denominator'

# Backends
FLINT = 'flint'
SYMPY = 'sympy'
