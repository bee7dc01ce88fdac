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


"""Software model of the FP8 ALU bitwise operations.

Logic Model
===========

AND, OR, XOR and NOT act on the raw 8-bit patterns without decoding them.
They never set any flag. NOT uses only the first operand.

The ``config`` argument is accepted for a uniform evaluator signature and
is ignored.
"""

from fp8alu.config import DEFAULT_CONFIG, MASK8, ModelConfig
from fp8alu.fp8_types import AluResult, FP8Bits


def fp8_and(a_bits: int, b_bits: int, _config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """AND: result = a & b."""
    return AluResult(FP8Bits(a_bits & b_bits & MASK8))


def fp8_or(a_bits: int, b_bits: int, _config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """OR: result = a | b."""
    return AluResult(FP8Bits((a_bits | b_bits) & MASK8))


def fp8_xor(a_bits: int, b_bits: int, _config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """XOR: result = a ^ b."""
    return AluResult(FP8Bits((a_bits ^ b_bits) & MASK8))


def fp8_not(a_bits: int, _unused: int = 0, _config: ModelConfig = DEFAULT_CONFIG) -> AluResult:
    """NOT: result = ~a. The second operand is ignored."""
    return AluResult(FP8Bits(~a_bits & MASK8))
