#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.


"""Utility functions for the FP8 ALU model.

Modules
-------
bit_utils
    Masking, field extraction/insertion, OR-reduction, leading-one

operation_logger
    Structured logging of evaluations and mismatches

validation
    Enhanced assertion utilities:
    - Fp8Assertions for operand and selector width checks
    - assert_matches_model for checking observed results

Usage
-----
Import utilities as needed::

    from fp8alu.utils.validation import assert_matches_model

    assert_matches_model(a, b, op, observed)
"""

from fp8alu.utils.bit_utils import extract_field, or_reduce, to_u8

# Note: validation is not imported at package level to avoid circular imports
# (it depends on the models, which depend on bit_utils).
# Import directly when needed: from fp8alu.utils.validation import ...

__all__ = [
    "extract_field",
    "or_reduce",
    "to_u8",
]
