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


"""Top-level FP8 ALU model: operation dispatch.

ALU Model
=========

``evaluate(a, b, op)`` is the single entry point a testbench needs. It maps
the 3-bit selector to one of the arithmetic or logic models and returns an
``AluResult``. It is a pure function: no state survives between calls, so
any number of evaluations may run concurrently.

Selector codes:

    ===== ====
    Code  Op
    ===== ====
    000   ADD
    001   SUB
    010   MUL
    011   DIV
    100   AND
    101   OR
    110   XOR
    111   NOT (first operand only)
    ===== ====

Any other selector value sets ``invalid_op`` and returns zero.
"""

from collections.abc import Callable

from fp8alu.config import DEFAULT_CONFIG, ModelConfig
from fp8alu.fp8_types import AluOp, AluResult, OpCode
from fp8alu.models.arith_model import fp8_add, fp8_div, fp8_mul, fp8_sub
from fp8alu.models.fp8_codec import FP8_POS_ZERO
from fp8alu.models.logic_model import fp8_and, fp8_not, fp8_or, fp8_xor
from fp8alu.utils.bit_utils import to_u8

Evaluator = Callable[[int, int, ModelConfig], AluResult]

EVALUATORS: dict[AluOp, Evaluator] = {
    AluOp.ADD: fp8_add,
    AluOp.SUB: fp8_sub,
    AluOp.MUL: fp8_mul,
    AluOp.DIV: fp8_div,
    AluOp.AND: fp8_and,
    AluOp.OR: fp8_or,
    AluOp.XOR: fp8_xor,
    AluOp.NOT: fp8_not,
}

INVALID_OP_RESULT = AluResult(FP8_POS_ZERO, invalid_op=True)


def evaluate(
    a_bits: int, b_bits: int, op: OpCode, config: ModelConfig = DEFAULT_CONFIG
) -> AluResult:
    """Evaluate one ALU operation.

    Args:
        a_bits: First operand encoding (masked to 8 bits)
        b_bits: Second operand encoding (masked to 8 bits)
        op: Operation selector (an ``AluOp`` or its integer code)
        config: Behavioral variant selection

    Returns:
        Encoded result and flags. Never raises for integer inputs.
    """
    evaluator = EVALUATORS.get(op) if isinstance(op, int) else None
    if evaluator is None:
        return INVALID_OP_RESULT
    return evaluator(to_u8(a_bits), to_u8(b_bits), config)
