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


"""Validation utilities and improved assertions for checking ALU results.

Validation Utilities
====================

This module provides assertion and validation functions with rich error
reporting. Unlike standard Python assertions, these carry detailed
context to help debug failures quickly.

Provided Utilities:

    ValidationError: Enhanced AssertionError with context dict
        - Stores context as attributes
        - Formats context in error message

    Assertion Functions:
        - assert_equals(): Compare values with detailed mismatch info
        - assert_in_range(): Check value bounds
        - assert_bit_width(): Ensure value fits in bit width
        - assert_matches_model(): Check an observed result against the model

    Fp8Assertions: Operand and selector checks
        - assert_operand_valid(): Operand fits in 8 bits
        - assert_opcode_valid(): Selector fits in 3 bits

When running under a cocotb simulation, failures report the simulation's
``RANDOM_SEED`` for reproducibility.

Example:
    >>> try:
    ...     assert_matches_model(0x46, 0x34, AluOp.ADD, AluResult(0x4F))
    ... except MismatchError as e:
    ...     print(hex(e.expected_value))  # response word 0x500
"""

import logging
from typing import Any

import cocotb

from fp8alu.config import DEFAULT_CONFIG, FP8_WIDTH, OPCODE_WIDTH, ModelConfig
from fp8alu.encoders.vector_encode import enc_response
from fp8alu.exceptions import MismatchError
from fp8alu.fp8_types import AluResult
from fp8alu.models.alu_model import evaluate
from fp8alu.models.fp8_codec import decode
from fp8alu.utils.operation_logger import OperationLogger, format_flags, log, op_name


class ValidationError(AssertionError):
    """Enhanced assertion error with context."""

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with message and context."""
        self.context = context
        context_str = "\n".join(f"  {k}: {v}" for k, v in context.items())
        super().__init__(f"{message}\nContext:\n{context_str}" if context else message)


def _random_seed() -> int | None:
    """Seed of the running cocotb simulation, or None outside one."""
    return getattr(cocotb, "RANDOM_SEED", None)


def assert_equals(
    actual: Any, expected: Any, message: str = "", **context: Any
) -> None:
    """Assert equality with enhanced error reporting."""
    if actual != expected:
        base_msg = message or f"Expected {expected}, got {actual}"
        seed = _random_seed()
        if seed is not None:
            log.info(f"cocotb RANDOM_SEED is {seed}")
        raise ValidationError(
            base_msg,
            actual=actual,
            expected=expected,
            difference=actual - expected if isinstance(actual, int | float) else None,
            **context,
        )


def assert_in_range(
    value: int, min_val: int, max_val: int, name: str = "value"
) -> None:
    """Assert value is within range."""
    if not min_val <= value <= max_val:
        raise ValidationError(
            f"{name} out of range",
            value=value,
            min=min_val,
            max=max_val,
            out_by=min(abs(value - min_val), abs(value - max_val)),
        )


def assert_bit_width(value: int, bits: int, name: str = "value") -> None:
    """Assert value fits in specified bit width."""
    max_val = (1 << bits) - 1
    if value < 0 or value > max_val:
        raise ValidationError(
            f"{name} exceeds {bits}-bit width",
            value=hex(value),
            bits=bits,
            max_value=hex(max_val),
        )


class Fp8Assertions:
    """FP8 ALU input checks."""

    @staticmethod
    def assert_operand_valid(bits: int) -> None:
        """Assert operand is an 8-bit pattern."""
        assert_bit_width(bits, FP8_WIDTH, "operand")

    @staticmethod
    def assert_opcode_valid(op: int) -> None:
        """Assert selector is a 3-bit code."""
        assert_bit_width(op, OPCODE_WIDTH, "opcode")


def assert_matches_model(
    a: int,
    b: int,
    op: int,
    observed: AluResult,
    config: ModelConfig = DEFAULT_CONFIG,
) -> AluResult:
    """Check an observed result and flags against the reference model.

    Comparison is bitwise on the result and exact on all four flags.

    Args:
        a: First operand encoding
        b: Second operand encoding
        op: Operation selector
        observed: Result produced by the implementation under test
        config: Variant the implementation is expected to follow

    Returns:
        The model's expected result

    Raises:
        MismatchError: If result or any flag differs
    """
    expected = evaluate(a, b, op, config)
    if observed != expected:
        seed = _random_seed()
        OperationLogger.log_mismatch(a, b, op, expected, observed, config, seed)
        raise MismatchError(
            f"{op_name(op)}: a=0x{a:02x} b=0x{b:02x} expected 0x{expected.result:02x} "
            f"({decode(expected.result, config):g}) [{format_flags(expected)}], "
            f"got 0x{observed.result:02x} ({decode(observed.result, config):g}) "
            f"[{format_flags(observed)}]",
            expected_value=enc_response(expected),
            actual_value=enc_response(observed),
            operands=(a, b, op),
        )
    OperationLogger.log_evaluation(a, b, op, expected, config, level=logging.DEBUG)
    return expected
