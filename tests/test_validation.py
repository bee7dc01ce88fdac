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


"""Tests for validation assertions, operation logging and configuration."""

import logging

import pytest

from fp8alu.config import (
    DEFAULT_CONFIG,
    FLUSH_TO_ZERO_CONFIG,
    DenormalMode,
    ModelConfig,
)
from fp8alu.exceptions import ConfigurationError, Fp8ModelError, MismatchError
from fp8alu.fp8_types import AluOp, AluResult
from fp8alu.utils.operation_logger import (
    LOGGER_NAME,
    OperationLogger,
    format_flags,
    format_operand,
)
from fp8alu.utils.validation import (
    Fp8Assertions,
    ValidationError,
    assert_bit_width,
    assert_equals,
    assert_in_range,
    assert_matches_model,
)


# ============================================================================
# Configuration
# ============================================================================


def test_default_config_uses_gradual_underflow():
    assert DEFAULT_CONFIG.denormal_mode is DenormalMode.GRADUAL
    assert DEFAULT_CONFIG.gradual_underflow
    assert not FLUSH_TO_ZERO_CONFIG.gradual_underflow


def test_config_rejects_too_few_divide_bits():
    with pytest.raises(ConfigurationError):
        ModelConfig(div_fraction_bits=4)


@pytest.mark.parametrize("bits", [8.0, "8", True, None])
def test_config_rejects_non_integer_divide_bits(bits):
    with pytest.raises(ConfigurationError):
        ModelConfig(div_fraction_bits=bits)


def test_config_rejects_unknown_denormal_mode():
    with pytest.raises(Fp8ModelError):
        ModelConfig(denormal_mode="gradual")


# ============================================================================
# Assertions
# ============================================================================


def test_validation_error_carries_context():
    with pytest.raises(ValidationError) as excinfo:
        assert_equals(0x4F, 0x50, "result mismatch", op="add")
    assert excinfo.value.context["expected"] == 0x50
    assert excinfo.value.context["difference"] == -1
    assert "op: add" in str(excinfo.value)


def test_assert_equals_passes_on_equal_values():
    assert_equals(0x50, 0x50)


def test_range_and_width_checks():
    assert_in_range(7, 0, 7)
    with pytest.raises(ValidationError):
        assert_in_range(8, 0, 7, "opcode")
    assert_bit_width(0xFF, 8)
    with pytest.raises(ValidationError):
        assert_bit_width(0x100, 8)


def test_fp8_assertions():
    Fp8Assertions.assert_operand_valid(0xFF)
    Fp8Assertions.assert_opcode_valid(7)
    with pytest.raises(ValidationError):
        Fp8Assertions.assert_operand_valid(-1)
    with pytest.raises(ValidationError):
        Fp8Assertions.assert_opcode_valid(8)


def test_matching_result_returns_expected():
    observed = AluResult(0x50)
    assert assert_matches_model(0x46, 0x34, AluOp.ADD, observed) == observed


def test_mismatched_result_raises(caplog):
    caplog.set_level(logging.ERROR, logger=LOGGER_NAME)
    with pytest.raises(MismatchError) as excinfo:
        assert_matches_model(0x46, 0x34, AluOp.ADD, AluResult(0x4F))
    error = excinfo.value
    assert error.expected_value == 0x500
    assert error.actual_value == 0x4F0
    assert error.operands == (0x46, 0x34, AluOp.ADD)
    assert "ADD" in str(error)
    assert "ADD mismatch" in caplog.text


def test_mismatched_flag_raises():
    with pytest.raises(MismatchError):
        assert_matches_model(0x40, 0x00, AluOp.DIV, AluResult(0x7F, overflow=True))


def test_match_honors_config():
    observed = AluResult(0x00, underflow=True, zero=True)
    assert_matches_model(0x40, 0x3F, AluOp.SUB, observed, FLUSH_TO_ZERO_CONFIG)
    with pytest.raises(MismatchError):
        assert_matches_model(0x40, 0x3F, AluOp.SUB, observed)


# ============================================================================
# Logging
# ============================================================================


def test_format_flags():
    assert format_flags(AluResult(0x00)) == "----"
    assert format_flags(AluResult(0x7F, overflow=True, invalid_op=True)) == "O--I"
    assert format_flags(AluResult(0x80, underflow=True, zero=True)) == "-UZ-"


def test_format_operand():
    assert format_operand(0x48) == "0x48 (3)"
    assert format_operand(0xB8) == "0xb8 (-1.5)"


def test_log_evaluation(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    OperationLogger.log_evaluation(0x46, 0x34, AluOp.ADD, AluResult(0x50))
    assert "ADD 0x46 (2.75), 0x34 (1.25) -> 0x50 (4) [----]" in caplog.text


def test_log_evaluation_of_not_omits_second_operand(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    OperationLogger.log_evaluation(0x0F, 0x34, AluOp.NOT, AluResult(0xF0))
    assert "0x34" not in caplog.text
    assert "-> 0xf0" in caplog.text


def test_log_mismatch_includes_seed(caplog):
    caplog.set_level(logging.ERROR, logger=LOGGER_NAME)
    OperationLogger.log_mismatch(
        0x46, 0x34, 9, AluResult(0x00, invalid_op=True), AluResult(0x50), seed=1234
    )
    assert "OP9 mismatch" in caplog.text
    assert "RANDOM_SEED is 1234" in caplog.text
