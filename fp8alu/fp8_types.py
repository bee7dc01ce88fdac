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


"""Type aliases and value types for the FP8 ALU model.

Types
=====

NewTypes for the raw bit patterns flowing through the model, the operation
selector enum, and the immutable result returned by every operation.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, NewType

# Encoding-related types
FP8Bits = NewType("FP8Bits", int)
"""8-bit encoded minifloat (0x00 to 0xFF). Equality is bitwise."""

ExponentField = NewType("ExponentField", int)
"""3-bit biased exponent field (0-7)."""

MantissaField = NewType("MantissaField", int)
"""4-bit fraction field (0-15)."""

Significand = NewType("Significand", int)
"""Mantissa with its leading bit restored (5 bits, plus any extension bits)."""

# Operation-related types
OpCode = NewType("OpCode", int)
"""3-bit operation selector."""


class AluOp(IntEnum):
    """Operation selector codes, fixed for compatibility with reference vectors."""

    ADD = 0b000
    SUB = 0b001
    MUL = 0b010
    DIV = 0b011
    AND = 0b100
    OR = 0b101
    XOR = 0b110
    NOT = 0b111

    @property
    def is_arithmetic(self) -> bool:
        """True for the float operations (ADD, SUB, MUL, DIV)."""
        return self <= AluOp.DIV


class AluFlags(NamedTuple):
    """The four status flags, in response-word order (MSB first)."""

    overflow: bool = False
    underflow: bool = False
    zero: bool = False
    invalid_op: bool = False


@dataclass(frozen=True)
class AluResult:
    """Result of one ALU evaluation.

    Returned by value from every operation; nothing is carried over between
    calls.

    Attributes:
        result: 8-bit encoded result
        overflow: Magnitude exceeded the range, result is the saturation sentinel
        underflow: Magnitude fell below the normal range
        zero: Result value is exactly zero
        invalid_op: Unrecognized selector or division by zero
    """

    result: FP8Bits
    overflow: bool = False
    underflow: bool = False
    zero: bool = False
    invalid_op: bool = False

    @property
    def flags(self) -> AluFlags:
        """Flags as a tuple, for comparison and unpacking."""
        return AluFlags(self.overflow, self.underflow, self.zero, self.invalid_op)

    @property
    def any_flag(self) -> bool:
        return any(self.flags)
