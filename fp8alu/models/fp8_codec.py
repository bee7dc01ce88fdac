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


"""Format codec for the 8-bit minifloat.

FP8 Codec
=========

This module converts between the 8-bit encoding and real values, and
provides the field-level helpers the arithmetic models are built on.

Encoding:
    ``sign (1) | exponent (3, bias 3) | mantissa (4)``

Values:
    - Normal (exponent != 0): ``(-1)^s x 1.ffff x 2^(e - 3)``
    - Denormal (exponent == 0, fraction != 0): ``(-1)^s x 0.ffff x 2^-2``
      in GRADUAL mode, zero in FLUSH_TO_ZERO mode
    - Zero (exponent == 0, fraction == 0): both signs compare equal to 0.0
    - Saturation sentinel (exponent == 7, fraction == 15): the largest
      finite magnitude (31.0), used in place of infinity on overflow

All 256 bit patterns decode to a value; there is no NaN and no infinity.

``decode`` is exact. ``encode`` is a test-vector convenience that rounds to
nearest (ties away from zero) and clamps out-of-range magnitudes; the ALU
never calls it while evaluating.
"""

import math
from dataclasses import dataclass
from enum import Enum

from fp8alu.config import (
    DEFAULT_CONFIG,
    EXP_BIAS,
    EXP_FIELD_MASK,
    EXP_MAX,
    EXP_MIN_NORMAL,
    EXP_SHIFT,
    HIDDEN_BIT,
    MAGNITUDE_MASK,
    MANT_BITS,
    MANT_MASK,
    SIGN_SHIFT,
    ModelConfig,
)
from fp8alu.exceptions import EncodingError
from fp8alu.fp8_types import ExponentField, FP8Bits, MantissaField, Significand
from fp8alu.utils.bit_utils import extract_field, insert_field, to_u8

# Well-known encodings
FP8_POS_ZERO = FP8Bits(0x00)
FP8_NEG_ZERO = FP8Bits(0x80)
FP8_POS_MAX = FP8Bits(0x7F)  # saturation sentinel
FP8_NEG_MAX = FP8Bits(0xFF)

# Exponent bounds of the encode() normalization loop (unbiased)
_ENCODE_EXP_HIGH = EXP_MAX - EXP_BIAS
_ENCODE_EXP_LOW = -EXP_BIAS

_FRACTION_SCALE = 1 << MANT_BITS


class Fp8Class(Enum):
    """Classification of an encoding (cf. FCLASS)."""

    ZERO = "zero"
    DENORMAL = "denormal"
    NORMAL = "normal"
    SATURATED = "saturated"


@dataclass(frozen=True)
class Fp8Fields:
    """Decoded fields of an encoding.

    Attributes:
        sign: Sign bit (0 or 1)
        exponent: Biased exponent field (0-7)
        fraction: Fraction field (0-15)
    """

    sign: int
    exponent: ExponentField
    fraction: MantissaField

    @property
    def is_zero(self) -> bool:
        """Both fields clear (the zero encoding for either sign)."""
        return self.exponent == 0 and self.fraction == 0

    @property
    def is_denormal(self) -> bool:
        return self.exponent == 0 and self.fraction != 0

    def significand(self) -> tuple[Significand, int]:
        """Significand with the leading bit restored and its effective exponent.

        Denormals carry a cleared leading bit at the minimum normal exponent,
        so both classes align on the same scale.

        Returns:
            Tuple of (5-bit significand, biased effective exponent)
        """
        if self.exponent == 0:
            return Significand(self.fraction), EXP_MIN_NORMAL
        return Significand(HIDDEN_BIT | self.fraction), self.exponent


# ============================================================================
# Field access
# ============================================================================


def unpack(bits: int) -> Fp8Fields:
    """Split an encoding into sign, exponent and fraction fields."""
    bits = to_u8(bits)
    return Fp8Fields(
        sign=extract_field(bits, SIGN_SHIFT, 1),
        exponent=ExponentField(extract_field(bits, EXP_SHIFT, EXP_FIELD_MASK)),
        fraction=MantissaField(bits & MANT_MASK),
    )


def pack(sign: int, exponent: int, fraction: int) -> FP8Bits:
    """Assemble an encoding from its fields (each truncated to its width)."""
    return FP8Bits(
        insert_field(sign, SIGN_SHIFT, 1)
        | insert_field(exponent, EXP_SHIFT, EXP_FIELD_MASK)
        | (fraction & MANT_MASK)
    )


def saturated(sign: int) -> FP8Bits:
    """Signed saturation sentinel (exponent 7, fraction 15)."""
    return pack(sign, EXP_MAX, MANT_MASK)


def signed_zero(sign: int) -> FP8Bits:
    return FP8_NEG_ZERO if sign else FP8_POS_ZERO


def negate(bits: int) -> FP8Bits:
    """Flip the sign bit."""
    return FP8Bits(to_u8(bits) ^ (1 << SIGN_SHIFT))


# ============================================================================
# Predicates
# ============================================================================


def is_negative(bits: int) -> bool:
    """Check if the sign bit is set."""
    return bool(to_u8(bits) >> SIGN_SHIFT)


def is_zero(bits: int, config: ModelConfig = DEFAULT_CONFIG) -> bool:
    """Check if an encoding is numerically zero under the given mode.

    With gradual underflow only the two zero encodings qualify; with
    flush-to-zero the whole exponent-0 row does.
    """
    fields = unpack(bits)
    if config.gradual_underflow:
        return fields.is_zero
    return fields.exponent == 0


def operand_is_zero(fields: Fp8Fields, config: ModelConfig = DEFAULT_CONFIG) -> bool:
    """Same as ``is_zero`` for an already unpacked operand."""
    if config.gradual_underflow:
        return fields.is_zero
    return fields.exponent == 0


def is_denormal(bits: int, config: ModelConfig = DEFAULT_CONFIG) -> bool:
    """Check if an encoding is a denormal (never true with flush-to-zero)."""
    return config.gradual_underflow and unpack(bits).is_denormal


def is_saturated(bits: int) -> bool:
    """Check if an encoding is the saturation sentinel of either sign."""
    return (to_u8(bits) & MAGNITUDE_MASK) == FP8_POS_MAX


def classify(bits: int, config: ModelConfig = DEFAULT_CONFIG) -> Fp8Class:
    """Classify an encoding as zero, denormal, normal or saturated."""
    if is_zero(bits, config):
        return Fp8Class.ZERO
    if is_denormal(bits, config):
        return Fp8Class.DENORMAL
    if is_saturated(bits):
        return Fp8Class.SATURATED
    return Fp8Class.NORMAL


# ============================================================================
# Conversion
# ============================================================================


def decode(bits: int, config: ModelConfig = DEFAULT_CONFIG) -> float:
    """Convert an 8-bit encoding to its exact real value.

    Args:
        bits: 8-bit encoding (wider values are masked)
        config: Selects the interpretation of the exponent-0 row

    Returns:
        Signed value; both zero encodings return 0.0
    """
    bits = to_u8(bits)
    if bits & MAGNITUDE_MASK == 0:
        return 0.0
    fields = unpack(bits)
    if fields.exponent == 0 and not config.gradual_underflow:
        return 0.0
    significand, exponent = fields.significand()
    magnitude = math.ldexp(significand, exponent - EXP_BIAS - MANT_BITS)
    return -magnitude if fields.sign else magnitude


def encode(value: float, config: ModelConfig = DEFAULT_CONFIG) -> FP8Bits:
    """Convert a real value to the nearest 8-bit encoding.

    The magnitude is scaled into ``[1, 2)`` by halving or doubling within
    the representable exponent range, then the fraction is rounded to four
    bits (ties away from zero). A fraction that rounds up to 16 is clamped
    to 15 rather than carried into the exponent, so magnitudes past the top
    of the range saturate to the sentinel.

    Args:
        value: Real value to encode
        config: Selects denormal encoding or flush-to-zero for tiny values

    Returns:
        8-bit encoding

    Raises:
        EncodingError: If value is NaN
    """
    if math.isnan(value):
        raise EncodingError("NaN has no FP8 encoding", value=value)
    if value == 0.0:
        return FP8_POS_ZERO

    sign = 1 if value < 0.0 else 0
    if math.isinf(value):
        return saturated(sign)

    magnitude = abs(value)
    exponent = 0
    while magnitude >= 2.0 and exponent < _ENCODE_EXP_HIGH:
        magnitude /= 2.0
        exponent += 1
    while magnitude < 1.0 and exponent > _ENCODE_EXP_LOW:
        magnitude *= 2.0
        exponent -= 1

    biased = exponent + EXP_BIAS
    if biased < EXP_MIN_NORMAL:
        return _encode_tiny(sign, magnitude, config)

    fraction = min(int(_FRACTION_SCALE * (magnitude - 1.0) + 0.5), MANT_MASK)
    return pack(sign, min(biased, EXP_MAX), fraction)


def _encode_tiny(sign: int, magnitude: float, config: ModelConfig) -> FP8Bits:
    """Encode a value below the smallest normal.

    ``magnitude`` is the value scaled by ``2^3`` (the loop's lower bound), so
    the value is ``magnitude / 2`` units of the smallest normal.
    """
    if not config.gradual_underflow:
        # Nearest of zero and the smallest normal, ties away from zero
        return pack(sign, EXP_MIN_NORMAL, 0) if magnitude >= 1.0 else signed_zero(sign)

    # Denormal step is 2^-6; value / 2^-6 == magnitude * 2^3
    fraction = int(magnitude * (_FRACTION_SCALE >> 1) + 0.5)
    if fraction > MANT_MASK:
        return pack(sign, EXP_MIN_NORMAL, 0)
    return pack(sign, 0, fraction)
