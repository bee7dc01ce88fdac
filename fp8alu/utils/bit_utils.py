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


"""Bit manipulation helpers for fixed-width datapath values.

BIT UTILS
=========

This module provides the small set of bit operations the FP8 datapath is
built from:
- Masking to the 8-bit encoding width
- Field extraction and insertion
- OR-reduction (for sticky bits)
- Leading-one position

Constants like MASK8, EXP_SHIFT, etc. should be imported from config.
"""

from fp8alu.config import MASK8

__all__ = ["to_u8", "extract_field", "insert_field", "or_reduce", "leading_one"]


def to_u8(val: int) -> int:
    """Cast to an unsigned 8-bit pattern.

    Args:
        val: Value to convert (any int)

    Returns:
        Unsigned 8-bit integer (0 to 255)
    """
    return val & MASK8


def extract_field(val: int, shift: int, mask: int) -> int:
    """Extract a bit field.

    Args:
        val: Source value
        shift: Bit position (LSB) where the field starts
        mask: Bit mask for the field width (already right-aligned)

    Returns:
        Field value, right-aligned

    Example:
        >>> extract_field(0b0_100_1000, 4, 0x7)  # exponent of 3.0
        4
    """
    return (val >> shift) & mask


def insert_field(value: int, shift: int, mask: int) -> int:
    """Position a field value at its bit offset, truncating to the field width."""
    return (value & mask) << shift


def or_reduce(val: int) -> int:
    """Reduce all bits of a value with OR (1 if any bit is set)."""
    return 1 if val else 0


def leading_one(val: int) -> int:
    """Bit index of the most significant set bit, or -1 for zero.

    Example:
        >>> leading_one(0b1_0000)
        4
    """
    return val.bit_length() - 1
