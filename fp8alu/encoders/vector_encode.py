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


"""Packing of ALU stimulus and response words for reference vectors.

Vector Encoding
===============

Reference vectors let an RTL testbench replay model results without
running Python. Each vector is a stimulus word and the response word the
model expects for it.

Stimulus word (19 bits)::

    [18:16] op
    [15:8]  a
    [7:0]   b

Response word (12 bits)::

    [11:4]  result
    [3]     overflow
    [2]     underflow
    [1]     zero
    [0]     invalid_op

Example Usage:
    >>> hex(enc_stimulus(AluOp.ADD, a=0x46, b=0x34))
    '0x4634'
    >>> format_vector_line(AluOp.ADD, 0x46, 0x34, evaluate(0x46, 0x34, AluOp.ADD))
    '04634 500'
"""

from collections.abc import Iterable, Iterator

from fp8alu.config import (
    DEFAULT_CONFIG,
    FLAG_COUNT,
    FP8_WIDTH,
    MASK8,
    OPCODE_MASK,
    ModelConfig,
)
from fp8alu.fp8_types import AluOp, AluResult, FP8Bits, OpCode
from fp8alu.models.alu_model import evaluate

STIMULUS_WIDTH = 2 * FP8_WIDTH + 3
RESPONSE_WIDTH = FP8_WIDTH + FLAG_COUNT

_A_SHIFT = FP8_WIDTH
_OP_SHIFT = 2 * FP8_WIDTH

_OVERFLOW_BIT = 3
_UNDERFLOW_BIT = 2
_ZERO_BIT = 1
_INVALID_BIT = 0


def _pack_bits(*fields: tuple[int, int, int]) -> int:
    """Pack bit fields into one word.

    Args:
        fields: Variable number of tuples, each containing:
            - value: The value to insert
            - position: Bit position (LSB) where field starts
            - mask: Bit mask for the field width

    Returns:
        Packed word
    """
    result = 0
    for value, position, mask in fields:
        result |= (value & mask) << position
    return result


def enc_stimulus(op: OpCode, a: int, b: int) -> int:
    """Encode an ``(op, a, b)`` stimulus into a 19-bit word."""
    return _pack_bits(
        (op, _OP_SHIFT, OPCODE_MASK),
        (a, _A_SHIFT, MASK8),
        (b, 0, MASK8),
    )


def dec_stimulus(word: int) -> tuple[AluOp, FP8Bits, FP8Bits]:
    """Decode a stimulus word into ``(op, a, b)``."""
    return (
        AluOp((word >> _OP_SHIFT) & OPCODE_MASK),
        FP8Bits((word >> _A_SHIFT) & MASK8),
        FP8Bits(word & MASK8),
    )


def enc_response(result: AluResult) -> int:
    """Encode a result and its flags into a 12-bit word."""
    return _pack_bits(
        (result.result, FLAG_COUNT, MASK8),
        (int(result.overflow), _OVERFLOW_BIT, 1),
        (int(result.underflow), _UNDERFLOW_BIT, 1),
        (int(result.zero), _ZERO_BIT, 1),
        (int(result.invalid_op), _INVALID_BIT, 1),
    )


def dec_response(word: int) -> AluResult:
    """Decode a 12-bit response word."""
    return AluResult(
        result=FP8Bits((word >> FLAG_COUNT) & MASK8),
        overflow=bool((word >> _OVERFLOW_BIT) & 1),
        underflow=bool((word >> _UNDERFLOW_BIT) & 1),
        zero=bool((word >> _ZERO_BIT) & 1),
        invalid_op=bool((word >> _INVALID_BIT) & 1),
    )


def format_vector_line(op: int, a: int, b: int, result: AluResult) -> str:
    """Format one vector as ``<stimulus hex> <response hex>`` for $readmemh."""
    return f"{enc_stimulus(op, a, b):05x} {enc_response(result):03x}"


def iter_exhaustive_vectors(
    ops: Iterable[AluOp] = tuple(AluOp), config: ModelConfig = DEFAULT_CONFIG
) -> Iterator[str]:
    """Yield a vector line for every operand pair of every requested op.

    Order is deterministic: op, then a, then b, each ascending.
    """
    for op in ops:
        for a in range(MASK8 + 1):
            for b in range(MASK8 + 1):
                yield format_vector_line(op, a, b, evaluate(a, b, op, config))
