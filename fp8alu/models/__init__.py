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


"""Software reference models for FP8 ALU behavior.

These models compute the expected result and flags for every ALU
operation. A testbench compares them against the DUT (Design Under Test).

Modules
-------
fp8_codec
    Conversion between the 8-bit encoding and real values, field
    pack/unpack, and classification

alignment
    Shared datapath primitives:
    - Significand alignment with sticky-bit collection
    - Carry-out and cancellation normalization
    - Guard/round/sticky rounding
    - Leading-one normalization for products and quotients

arith_model
    ADD, SUB (rounded), MUL, DIV (truncated) with the saturation policy

logic_model
    AND, OR, XOR, NOT on raw bit patterns

alu_model
    ``evaluate(a, b, op)``: selector dispatch

Usage
-----
::

    from fp8alu.fp8_types import AluOp
    from fp8alu.models.alu_model import evaluate
    from fp8alu.models.fp8_codec import decode

    out = evaluate(0x40, 0x00, AluOp.DIV)  # invalid_op and overflow set
    decode(out.result)  # 31.0
"""

from fp8alu.models.alu_model import evaluate
from fp8alu.models.arith_model import fp8_add, fp8_div, fp8_mul, fp8_sub
from fp8alu.models.fp8_codec import decode, encode
from fp8alu.models.logic_model import fp8_and, fp8_not, fp8_or, fp8_xor

__all__ = [
    "evaluate",
    "fp8_add",
    "fp8_sub",
    "fp8_mul",
    "fp8_div",
    "fp8_and",
    "fp8_or",
    "fp8_xor",
    "fp8_not",
    "decode",
    "encode",
]
