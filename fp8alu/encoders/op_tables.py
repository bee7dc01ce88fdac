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


"""Operation tables mapping ALU mnemonics to encoders and evaluators.

Op Tables
=========

Central registry connecting operation mnemonics (like "add", "xor") to:

    1. Encoder function: Packs ``(a, b)`` into the stimulus word for that op
    2. Evaluator function: Computes the expected result in software

Table Structure:
    Each table maps: mnemonic -> (encoder_function, evaluator_function)

    - ALU_OPS: all eight operations
    - ARITHMETIC_OPS: add, sub, mul, div (float interpretation, set flags)
    - LOGIC_OPS: and, or, xor, not (raw bit patterns, never set flags)

Example Usage:
    >>> encoder, evaluator = ALU_OPS["mul"]
    >>> hex(encoder(a=0x38, b=0x40))
    '0x23840'
    >>> evaluator(0x38, 0x40).result  # 1.5 * 2.0
    72
"""

from collections.abc import Callable

from fp8alu.encoders.vector_encode import enc_stimulus
from fp8alu.fp8_types import AluOp
from fp8alu.models.alu_model import EVALUATORS


def make_stimulus_encoder(op: AluOp) -> Callable[[int, int], int]:
    """Create a stimulus encoder with the selector fixed to ``op``."""
    return lambda a, b: enc_stimulus(op, a, b)


MNEMONICS: dict[AluOp, str] = {op: op.name.lower() for op in AluOp}

# operation tables (mnemonic -> (encoder, evaluator))
ALU_OPS: dict[str, tuple[Callable, Callable]] = {
    MNEMONICS[op]: (make_stimulus_encoder(op), EVALUATORS[op]) for op in AluOp
}

ARITHMETIC_OPS: dict[str, tuple[Callable, Callable]] = {
    name: entry for name, entry in ALU_OPS.items() if AluOp[name.upper()].is_arithmetic
}

LOGIC_OPS: dict[str, tuple[Callable, Callable]] = {
    name: entry for name, entry in ALU_OPS.items() if name not in ARITHMETIC_OPS
}


def opcode_for(mnemonic: str) -> AluOp:
    """Look up the selector code for a mnemonic (case-insensitive).

    Raises:
        KeyError: If the mnemonic is not an ALU operation
    """
    return AluOp[mnemonic.upper()]
