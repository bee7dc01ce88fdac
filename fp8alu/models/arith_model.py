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


"""Software model of the FP8 arithmetic operations.

Arithmetic Model
================

Bit-exact reference implementations of ADD, SUB, MUL and DIV on 8-bit
encodings. Each function returns an ``AluResult`` carrying the encoded
result and the overflow/underflow/zero/invalid flags.

Boundary policy:
    - Exact zero results are the canonical ``0x00`` with ``zero`` set
    - Overflow saturates to the signed sentinel (exponent 7, fraction 15)
    - Underflow returns the denormal, never less than the smallest one
      (gradual mode), or signed zero (flush-to-zero mode, also sets ``zero``)
    - Divide by zero sets both ``invalid_op`` and ``overflow`` and returns
      the sentinel with the XOR of the operand signs

Precision:
    ADD/SUB round to nearest (ties to even) through guard/round/sticky
    bits. MUL/DIV truncate the low product/quotient bits. The asymmetry is
    part of the format's precision budget and is kept on purpose.
"""

from fp8alu.config import (
    DEFAULT_CONFIG,
    EXP_BIAS,
    EXP_MAX,
    EXP_MIN_NORMAL,
    HIDDEN_BIT,
    MANT_MASK,
    PRODUCT_FRACTION_BITS,
    ModelConfig,
)
from fp8alu.fp8_types import AluResult, FP8Bits
from fp8alu.models.alignment import (
    align_significands,
    normalize_sum,
    normalize_truncated,
    round_nearest_even,
)
from fp8alu.models.fp8_codec import (
    FP8_POS_ZERO,
    negate,
    operand_is_zero,
    pack,
    saturated,
    signed_zero,
    unpack,
)
from fp8alu.utils.bit_utils import to_u8

_ZERO_RESULT = AluResult(FP8_POS_ZERO, zero=True)


def _overflow(sign: int) -> AluResult:
    return AluResult(saturated(sign), overflow=True)


def _underflow(
    sign: int, significand: int, exponent: int, config: ModelConfig
) -> AluResult:
    """Result for a magnitude below the normal range.

    Gradual underflow truncates to a denormal and saturates at the
    smallest one; flush-to-zero returns signed zero.

    Args:
        sign: Result sign
        significand: 5-bit significand at ``exponent``
        exponent: Effective exponent, at most ``EXP_MIN_NORMAL``
        config: Selects gradual underflow or flush-to-zero
    """
    if config.gradual_underflow:
        fraction = max(significand >> (EXP_MIN_NORMAL - exponent), 1)
        return AluResult(pack(sign, 0, fraction), underflow=True)
    return AluResult(signed_zero(sign), underflow=True, zero=True)


def _finish(
    sign: int, significand: int, exponent: int, config: ModelConfig
) -> AluResult:
    """Apply the overflow/underflow policy and pack a result."""
    if exponent > EXP_MAX:
        return _overflow(sign)
    if exponent < EXP_MIN_NORMAL or not significand & HIDDEN_BIT:
        return _underflow(sign, significand, exponent, config)
    return AluResult(pack(sign, exponent, significand & MANT_MASK))


# ============================================================================
# Add / Subtract
# ============================================================================


def _add_signed(
    a_bits: int, b_bits: int, config: ModelConfig, subtract: bool
) -> AluResult:
    """Sign-magnitude add of A and (optionally negated) B."""
    a_bits = to_u8(a_bits)
    b_bits = to_u8(b_bits)
    a = unpack(a_bits)
    b = unpack(b_bits)
    sign_b = b.sign ^ int(subtract)

    a_zero = operand_is_zero(a, config)
    b_zero = operand_is_zero(b, config)
    if a_zero and b_zero:
        return _ZERO_RESULT
    if b_zero:
        return AluResult(FP8Bits(a_bits))
    if a_zero:
        return AluResult(negate(b_bits) if subtract else FP8Bits(b_bits))

    sig_a, exp_a = a.significand()
    sig_b, exp_b = b.significand()
    ext_a, ext_b, exponent = align_significands(sig_a, exp_a, sig_b, exp_b)

    # Larger magnitude decides which side is subtracted and the result sign
    if (exp_a, sig_a) >= (exp_b, sig_b):
        larger, smaller, sign = ext_a, ext_b, a.sign
    else:
        larger, smaller, sign = ext_b, ext_a, sign_b

    if a.sign == sign_b:
        raw = larger + smaller
    else:
        raw = larger - smaller

    if raw == 0:
        return _ZERO_RESULT

    raw, exponent = normalize_sum(raw, exponent)
    significand, exponent = round_nearest_even(raw, exponent)
    return _finish(sign, significand, exponent, config)


def fp8_add(a_bits: int, b_bits: int, config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """ADD: result = a + b (round to nearest even)."""
    return _add_signed(a_bits, b_bits, config, subtract=False)


def fp8_sub(a_bits: int, b_bits: int, config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """SUB: result = a - b, computed as a + (-b)."""
    return _add_signed(a_bits, b_bits, config, subtract=True)


# ============================================================================
# Multiply / Divide
# ============================================================================


def fp8_mul(a_bits: int, b_bits: int, config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """MUL: result = a * b (truncating).

    The 5x5-bit significand product has 8 fraction bits and lies in
    ``[1.0, 4.0)`` for normal operands; a product of 2.0 or more takes one
    extra right shift and an exponent increment. Denormal operands are
    renormalized from the leading one of the product.
    """
    a = unpack(a_bits)
    b = unpack(b_bits)
    sign = a.sign ^ b.sign

    if operand_is_zero(a, config) or operand_is_zero(b, config):
        return _ZERO_RESULT

    sig_a, exp_a = a.significand()
    sig_b, exp_b = b.significand()
    product = sig_a * sig_b
    significand, exponent = normalize_truncated(
        product, PRODUCT_FRACTION_BITS, exp_a + exp_b - EXP_BIAS
    )
    return _finish(sign, significand, exponent, config)


def fp8_div(a_bits: int, b_bits: int, config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """DIV: result = a / b (truncating).

    The dividend significand is widened by ``config.div_fraction_bits``
    before the integer divide so the quotient keeps that many fraction
    bits. For normal operands the quotient lies in ``(0.5, 2.0)``.

    Division by zero (including 0 / 0) is flagged as both invalid and
    overflow and returns the signed saturation sentinel.
    """
    a = unpack(a_bits)
    b = unpack(b_bits)
    sign = a.sign ^ b.sign

    if operand_is_zero(b, config):
        return AluResult(saturated(sign), overflow=True, invalid_op=True)
    if operand_is_zero(a, config):
        return _ZERO_RESULT

    sig_a, exp_a = a.significand()
    sig_b, exp_b = b.significand()
    fraction_bits = config.div_fraction_bits
    quotient = (sig_a << fraction_bits) // sig_b
    significand, exponent = normalize_truncated(
        quotient, fraction_bits, exp_a - exp_b + EXP_BIAS
    )
    return _finish(sign, significand, exponent, config)
