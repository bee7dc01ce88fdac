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


"""Custom exceptions for the FP8 ALU model.

Exceptions
==========

The ALU itself never raises: every operand pair and selector produces a
defined result and flags. These exceptions cover misuse of the convenience
surfaces around it (value encoding, configuration) and mismatches reported
when an observed result is checked against the model.
"""


class Fp8ModelError(Exception):
    """Base exception for all FP8 model failures.

    All model-specific exceptions inherit from this base class,
    allowing callers to catch them with a single handler.
    """

    pass


class EncodingError(Fp8ModelError):
    """A real value has no FP8 encoding.

    Raised by ``encode()`` for NaN. Out-of-range magnitudes and infinities
    saturate instead of raising.
    """

    def __init__(self, message: str, value: float | None = None):
        """Initialize encoding error with the offending value.

        Args:
            message: Error description
            value: The value that could not be encoded
        """
        super().__init__(message)
        self.value = value


class ConfigurationError(Fp8ModelError):
    """Invalid model configuration."""

    pass


class MismatchError(Fp8ModelError):
    """Observed ALU output disagrees with the model.

    Raised when a result or flag set produced by the hardware (or any other
    implementation under test) differs from the reference model.
    """

    def __init__(
        self,
        message: str,
        expected_value: int | None = None,
        actual_value: int | None = None,
        operands: tuple[int, int, int] | None = None,
    ):
        """Initialize mismatch error with comparison context.

        Args:
            message: Error description
            expected_value: Expected response word from the model
            actual_value: Observed response word
            operands: The ``(a, b, op)`` stimulus that produced the mismatch
        """
        super().__init__(message)
        self.expected_value = expected_value
        self.actual_value = actual_value
        self.operands = operands
