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


"""Significand alignment, normalization and rounding.

Alignment & Normalization
=========================

Shared datapath primitives for the arithmetic models.

Add/subtract datapath (``ALIGN_WIDTH`` = 8 bits, plus one carry bit)::

    bit:   8      7     6..3      2       1       0
         carry  lead  mantissa  guard   round   sticky

    - ``align_significands`` moves both operands to the larger exponent,
      folding every bit shifted past the window into the sticky bit
    - ``normalize_sum`` removes a carry-out with one right shift, or
      left-shifts a cancelled sum until the leading bit is set or the
      minimum exponent is reached
    - ``round_nearest_even`` rounds the 5-bit significand using G/R/S

Multiply/divide datapath:

    - ``normalize_truncated`` moves the leading one of an unbounded
      fixed-point value to the ``1.xxxx`` position and truncates
"""

from fp8alu.config import EXP_MIN_NORMAL, GRS_BITS, MANT_BITS, SIGNIFICAND_BITS
from fp8alu.fp8_types import Significand
from fp8alu.utils.bit_utils import leading_one, or_reduce

ALIGN_WIDTH = SIGNIFICAND_BITS + GRS_BITS
LEAD_BIT = 1 << (ALIGN_WIDTH - 1)
CARRY_BIT = 1 << ALIGN_WIDTH

_GUARD_SHIFT = GRS_BITS - 1
_ROUND_SHIFT = GRS_BITS - 2
_SIGNIFICAND_OVERFLOW = 1 << SIGNIFICAND_BITS


def shift_right_sticky(value: int, amount: int, width: int = ALIGN_WIDTH) -> int:
    """Shift right, OR-ing every bit shifted out into bit 0.

    Shift amounts at or beyond ``width`` saturate the value to zero; only
    the sticky bit survives.

    Args:
        value: Unsigned datapath value
        amount: Right shift amount (non-positive amounts are a no-op)
        width: Width of the value in bits

    Returns:
        Shifted value with sticky bit folded into bit 0
    """
    if amount <= 0:
        return value
    if amount >= width:
        return or_reduce(value)
    lost = value & ((1 << amount) - 1)
    return (value >> amount) | or_reduce(lost)


def extend(significand: int) -> int:
    """Append cleared guard/round/sticky bits below a 5-bit significand."""
    return significand << GRS_BITS


def align_significands(
    sig_a: int, exp_a: int, sig_b: int, exp_b: int
) -> tuple[int, int, int]:
    """Bring two significands to the larger of their exponents.

    Args:
        sig_a: 5-bit significand of operand A
        exp_a: Effective biased exponent of A
        sig_b: 5-bit significand of operand B
        exp_b: Effective biased exponent of B

    Returns:
        Tuple of (extended A, extended B, common exponent)
    """
    ext_a = extend(sig_a)
    ext_b = extend(sig_b)
    if exp_a >= exp_b:
        return ext_a, shift_right_sticky(ext_b, exp_a - exp_b), exp_a
    return shift_right_sticky(ext_a, exp_b - exp_a), ext_b, exp_b


def carried_out(raw: int) -> bool:
    """Sum overflowed past the leading-bit position."""
    return bool(raw & CARRY_BIT)


def needs_left_shift(raw: int) -> bool:
    """Leading significand bit is clear."""
    return not raw & LEAD_BIT


def normalize_sum(
    raw: int, exponent: int, min_exponent: int = EXP_MIN_NORMAL
) -> tuple[int, int]:
    """Renormalize a non-zero add/subtract result.

    Args:
        raw: Extended sum or difference (up to ``ALIGN_WIDTH + 1`` bits)
        exponent: Common exponent of the aligned operands
        min_exponent: Exponent at which left shifting stops

    Returns:
        Tuple of (extended significand, exponent). The leading bit is clear
        only when ``min_exponent`` was reached first.
    """
    if carried_out(raw):
        return shift_right_sticky(raw, 1, ALIGN_WIDTH + 1), exponent + 1
    while needs_left_shift(raw) and exponent > min_exponent:
        raw <<= 1
        exponent -= 1
    return raw, exponent


def round_nearest_even(raw: int, exponent: int) -> tuple[Significand, int]:
    """Round an extended significand to 5 bits.

    Rounds up when the guard bit is set and any of round, sticky or the
    retained LSB is set. A round-up that overflows the significand shifts
    it back into range and bumps the exponent.

    Args:
        raw: Normalized extended significand
        exponent: Its exponent

    Returns:
        Tuple of (5-bit significand, exponent)
    """
    kept = raw >> GRS_BITS
    guard = (raw >> _GUARD_SHIFT) & 1
    round_bit = (raw >> _ROUND_SHIFT) & 1
    sticky = raw & 1

    if guard and (round_bit or sticky or kept & 1):
        kept += 1
        if kept & _SIGNIFICAND_OVERFLOW:
            kept >>= 1
            exponent += 1
    return Significand(kept), exponent


def normalize_truncated(
    value: int, fraction_bits: int, exponent: int
) -> tuple[Significand, int]:
    """Normalize a fixed-point product or quotient to ``1.xxxx`` by truncation.

    Args:
        value: Non-zero unsigned value with ``fraction_bits`` fraction bits
        fraction_bits: Binary point position of ``value`` (at least 4)
        exponent: Exponent of ``value``

    Returns:
        Tuple of (5-bit significand with leading bit set, adjusted exponent)
    """
    lead = leading_one(value)
    if lead > fraction_bits:
        value >>= lead - fraction_bits
    elif lead < fraction_bits:
        value <<= fraction_bits - lead
    exponent += lead - fraction_bits
    return Significand(value >> (fraction_bits - MANT_BITS)), exponent
