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


"""Tests for the FP8 format codec."""

import math

import pytest

from fp8alu.config import DEFAULT_CONFIG, FLUSH_TO_ZERO_CONFIG
from fp8alu.exceptions import EncodingError
from fp8alu.models.fp8_codec import (
    FP8_NEG_MAX,
    FP8_NEG_ZERO,
    FP8_POS_MAX,
    FP8_POS_ZERO,
    Fp8Class,
    classify,
    decode,
    encode,
    is_denormal,
    is_negative,
    is_saturated,
    is_zero,
    negate,
    pack,
    signed_zero,
    unpack,
)


@pytest.mark.parametrize(
    "bits, value",
    [
        (0x00, 0.0),
        (0x80, 0.0),
        (0x30, 1.0),
        (0x40, 2.0),
        (0x48, 3.0),
        (0xC8, -3.0),
        (0x46, 2.75),
        (0x34, 1.25),
        (0x10, 0.25),
        (0x7F, 31.0),
        (0xFF, -31.0),
        (0x01, 1 / 64),
        (0x0F, 15 / 64),
        (0x88, -0.125),
    ],
)
def test_decode_known_values(bits, value):
    assert decode(bits) == value


def test_encode_three():
    assert encode(3.0) == 0b0_100_1000
    assert decode(0x48) == 3.0


def test_flush_to_zero_decodes_exponent_zero_row_as_zero():
    for fraction in range(16):
        assert decode(fraction, FLUSH_TO_ZERO_CONFIG) == 0.0
        assert decode(0x80 | fraction, FLUSH_TO_ZERO_CONFIG) == 0.0
    assert decode(0x10, FLUSH_TO_ZERO_CONFIG) == 0.25


def test_decode_masks_to_eight_bits():
    assert decode(0x148) == 3.0


@pytest.mark.parametrize("config", [DEFAULT_CONFIG, FLUSH_TO_ZERO_CONFIG])
def test_round_trip_of_representable_values(config):
    for bits in range(256):
        value = decode(bits, config)
        assert decode(encode(value, config), config) == value, hex(bits)


def test_encode_recovers_every_nonzero_pattern():
    for bits in range(256):
        if bits & 0x7F == 0:
            continue
        assert encode(decode(bits)) == bits, hex(bits)


def test_encode_signed_zero_inputs():
    assert encode(0.0) == 0x00
    assert encode(-0.0) == 0x00


def test_signed_zero():
    assert signed_zero(0) == FP8_POS_ZERO == 0x00
    assert signed_zero(1) == FP8_NEG_ZERO == 0x80
    assert is_zero(signed_zero(1))


def test_encode_rounds_ties_away_from_zero():
    # 1 + 0.5/16 sits halfway between 0x30 and 0x31
    assert encode(1.03125) == 0x31
    assert encode(-1.03125) == 0xB1
    assert encode(1.02) == 0x30


def test_encode_clamps_fraction_instead_of_carrying():
    # 1.99 rounds to a fraction of 16, which clamps to 15
    assert encode(1.99) == 0x3F


@pytest.mark.parametrize(
    "value, bits",
    [
        (31.0, 0x7F),
        (40.0, 0x7F),
        (1e300, 0x7F),
        (-1e9, 0xFF),
        (math.inf, 0x7F),
        (-math.inf, 0xFF),
    ],
)
def test_encode_saturates(value, bits):
    assert encode(value) == bits


def test_encode_nan_raises():
    with pytest.raises(EncodingError) as excinfo:
        encode(math.nan)
    assert math.isnan(excinfo.value.value)


@pytest.mark.parametrize(
    "value, gradual, flushed",
    [
        (0.1, 0x06, 0x00),
        (0.2, 0x0D, 0x10),
        (0.248, 0x10, 0x10),
        (0.001, 0x00, 0x00),
        (-0.001, 0x80, 0x80),
        (-0.1, 0x86, 0x80),
    ],
)
def test_encode_below_smallest_normal(value, gradual, flushed):
    assert encode(value) == gradual
    assert encode(value, FLUSH_TO_ZERO_CONFIG) == flushed


def test_unpack_and_pack():
    fields = unpack(0xC8)
    assert (fields.sign, fields.exponent, fields.fraction) == (1, 4, 8)
    assert pack(1, 4, 8) == 0xC8
    assert pack(0, 9, 17) == pack(0, 1, 1)


def test_significand_restores_leading_bit():
    assert unpack(0x48).significand() == (24, 4)
    assert unpack(0x05).significand() == (5, 1)


def test_sign_helpers():
    assert negate(0x48) == 0xC8
    assert negate(0xC8) == 0x48
    assert is_negative(0x80)
    assert not is_negative(0x7F)


def test_zero_and_denormal_predicates_follow_mode():
    assert is_zero(0x00) and is_zero(0x80)
    assert not is_zero(0x05)
    assert is_zero(0x05, FLUSH_TO_ZERO_CONFIG)
    assert is_denormal(0x05)
    assert not is_denormal(0x05, FLUSH_TO_ZERO_CONFIG)


def test_classify():
    assert classify(0x00) is Fp8Class.ZERO
    assert classify(0x80) is Fp8Class.ZERO
    assert classify(0x05) is Fp8Class.DENORMAL
    assert classify(0x05, FLUSH_TO_ZERO_CONFIG) is Fp8Class.ZERO
    assert classify(0x48) is Fp8Class.NORMAL
    assert classify(FP8_POS_MAX) is Fp8Class.SATURATED
    assert is_saturated(FP8_NEG_MAX)
