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


"""Tests for the logic model and the ``evaluate`` dispatcher."""

import pytest

from fp8alu import AluFlags, AluOp, AluResult, decode, encode, evaluate
from fp8alu.config import FLUSH_TO_ZERO_CONFIG
from fp8alu.fp8_types import OpCode
from fp8alu.models.logic_model import fp8_and, fp8_not, fp8_or, fp8_xor


def test_selector_codes_are_fixed():
    assert [int(op) for op in AluOp] == list(range(8))
    assert [op.name for op in AluOp] == [
        "ADD",
        "SUB",
        "MUL",
        "DIV",
        "AND",
        "OR",
        "XOR",
        "NOT",
    ]


def test_logic_ops_on_raw_patterns():
    assert fp8_and(0b1010_1010, 0b1100_1100) == AluResult(0b1000_1000)
    assert fp8_or(0b1010_1010, 0b1100_1100) == AluResult(0b1110_1110)
    assert fp8_xor(0b1010_1010, 0b1100_1100) == AluResult(0b0110_0110)
    assert fp8_not(0x0F, 0xAA) == AluResult(0xF0)


def test_xor_scenario():
    out = evaluate(0b1010_1010, 0b1100_1100, AluOp.XOR)
    assert out.result == 0b0110_0110
    assert out.flags == AluFlags(False, False, False, False)


def test_not_ignores_second_operand():
    assert evaluate(0x48, 0x00, AluOp.NOT) == evaluate(0x48, 0xFF, AluOp.NOT)


def test_logic_result_of_zero_sets_no_flag():
    assert evaluate(0x5A, 0x5A, AluOp.XOR) == AluResult(0x00)


@pytest.mark.parametrize(
    "a, b, op, expected",
    [
        (0x46, 0x34, AluOp.ADD, AluResult(0x50)),
        (0x46, 0x34, 0b000, AluResult(0x50)),
        (0x46, 0x34, OpCode(0b001), AluResult(0x38)),  # 2.75 - 1.25
        (0x48, 0x44, AluOp.SUB, AluResult(0x20)),
        (0x38, 0x40, AluOp.MUL, AluResult(0x48)),
        (0x48, 0x40, AluOp.DIV, AluResult(0x38)),
        (0x40, 0x00, AluOp.DIV, AluResult(0x7F, overflow=True, invalid_op=True)),
        (0b1100_0000, 0b0100_0000, AluOp.ADD, AluResult(0x00, zero=True)),
    ],
)
def test_dispatch_routes_to_models(a, b, op, expected):
    assert evaluate(a, b, op) == expected


@pytest.mark.parametrize("op", [8, -1, 0x10, None, "add", 2.0])
def test_unknown_selector_is_invalid(op):
    assert evaluate(0x48, 0x40, op) == AluResult(0x00, invalid_op=True)


def test_operands_are_masked_to_eight_bits():
    assert evaluate(0x148, 0x240, AluOp.MUL) == evaluate(0x48, 0x40, AluOp.MUL)


def test_config_is_forwarded():
    assert evaluate(0x40, 0x3F, AluOp.SUB) == AluResult(0x04, underflow=True)
    assert evaluate(0x40, 0x3F, AluOp.SUB, FLUSH_TO_ZERO_CONFIG) == AluResult(
        0x00, underflow=True, zero=True
    )


def test_add_within_one_ulp_of_real_sum():
    out = evaluate(encode(2.75), encode(1.25), AluOp.ADD)
    assert abs(decode(out.result) - 4.0) <= 0.25


def test_result_is_immutable():
    out = evaluate(0x46, 0x34, AluOp.ADD)
    with pytest.raises(AttributeError):
        out.zero = True
