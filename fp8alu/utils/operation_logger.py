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


"""Structured logging for ALU evaluations and mismatches.

Operation Logger
================

Provides formatted, context-rich log lines for model evaluations so a
failing vector can be read without decoding bit patterns by hand.

Loggers live under the ``cocotb`` hierarchy (``cocotb.fp8alu``): inside a
simulation they pick up cocotb's handlers and formatting, and outside one
they behave like any other logger.
"""

import logging

from fp8alu.config import DEFAULT_CONFIG, ModelConfig
from fp8alu.fp8_types import AluOp, AluResult
from fp8alu.models.fp8_codec import decode

LOGGER_NAME = "cocotb.fp8alu"

log = logging.getLogger(LOGGER_NAME)

_FLAG_LETTERS = "OUZI"


def format_flags(result: AluResult) -> str:
    """Render the flags as a 4-character string, e.g. ``O--I``.

    Letters are overflow, underflow, zero, invalid_op; ``-`` marks a clear flag.
    """
    return "".join(
        letter if flag else "-" for letter, flag in zip(_FLAG_LETTERS, result.flags)
    )


def format_operand(bits: int, config: ModelConfig = DEFAULT_CONFIG) -> str:
    """Render an encoding as hex plus its decoded value."""
    return f"0x{bits:02x} ({decode(bits, config):g})"


def op_name(op: int) -> str:
    """Mnemonic of a selector, or OP<n> for unknown codes."""
    try:
        return AluOp(op).name
    except ValueError:
        return f"OP{op}"


class OperationLogger:
    """Structured logging for FP8 ALU operations."""

    @staticmethod
    def log_evaluation(
        a: int,
        b: int,
        op: int,
        result: AluResult,
        config: ModelConfig = DEFAULT_CONFIG,
        level: int = logging.INFO,
    ) -> None:
        """Log one evaluation with decoded operands and result.

        Args:
            a: First operand encoding
            b: Second operand encoding
            op: Operation selector
            result: Model (or observed) result
            config: Variant used to decode values for display
            level: Logging level for the message
        """
        parts = [f"{op_name(op):3s}", format_operand(a, config)]
        if op != AluOp.NOT:
            parts[-1] += ","
            parts.append(format_operand(b, config))
        parts.append("->")
        parts.append(format_operand(result.result, config))
        parts.append(f"[{format_flags(result)}]")
        log.log(level, " ".join(parts))

    @staticmethod
    def log_mismatch(
        a: int,
        b: int,
        op: int,
        expected: AluResult,
        actual: AluResult,
        config: ModelConfig = DEFAULT_CONFIG,
        seed: int | None = None,
    ) -> None:
        """Log a model/observed mismatch as an error block.

        Args:
            a: First operand encoding
            b: Second operand encoding
            op: Operation selector
            expected: Result computed by the model
            actual: Result observed from the implementation under test
            config: Variant used to decode values for display
            seed: Random seed of the run, when known
        """
        log.error(
            f"{op_name(op)} mismatch for a={format_operand(a, config)} "
            f"b={format_operand(b, config)}"
        )
        log.error(
            f"  expected {format_operand(expected.result, config)} "
            f"[{format_flags(expected)}]"
        )
        log.error(
            f"  actual   {format_operand(actual.result, config)} "
            f"[{format_flags(actual)}]"
        )
        if seed is not None:
            log.error(f"  cocotb RANDOM_SEED is {seed}")
