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


"""Central configuration for the FP8 ALU model.

Config
======

Format constants for the 8-bit minifloat and the knobs that select between
the documented behavioral variants of the ALU.

Encoding (MSB to LSB)::

    [7]   sign
    [6:4] exponent (biased, bias = 3)
    [3:0] mantissa (fraction, implicit leading 1 for normals)

Constants are grouped by concern. Model code imports them from here rather
than repeating bit positions or widths.
"""

from dataclasses import dataclass
from enum import Enum

from fp8alu.exceptions import ConfigurationError

# ============================================================================
# Encoding layout
# ============================================================================

FP8_WIDTH = 8
MASK8 = 0xFF
MAGNITUDE_MASK = 0x7F  # everything except the sign bit

SIGN_SHIFT = 7
SIGN_MASK = 1 << SIGN_SHIFT

EXP_BITS = 3
EXP_SHIFT = 4
EXP_FIELD_MASK = (1 << EXP_BITS) - 1

MANT_BITS = 4
MANT_MASK = (1 << MANT_BITS) - 1

# ============================================================================
# Exponent range
# ============================================================================

EXP_BIAS = 3
EXP_MAX = EXP_FIELD_MASK
EXP_MIN_NORMAL = 1

# ============================================================================
# Significand datapath
# ============================================================================

SIGNIFICAND_BITS = MANT_BITS + 1
HIDDEN_BIT = 1 << MANT_BITS

# Guard, round and sticky bits carried below the significand on add/sub
GRS_BITS = 3

# Fraction bits of the raw significand product (4 + 4)
PRODUCT_FRACTION_BITS = 2 * MANT_BITS

# Fraction bits kept by the integer quotient on divide
DIV_FRACTION_BITS = 8

# ============================================================================
# Operation selector
# ============================================================================

OPCODE_WIDTH = 3
OPCODE_MASK = (1 << OPCODE_WIDTH) - 1

FLAG_COUNT = 4


class DenormalMode(Enum):
    """Interpretation of encodings with a zero exponent field.

    GRADUAL:
        ``exponent == 0, fraction != 0`` is a denormal worth
        ``0.ffff x 2^-2``. Results below the normal range degrade into
        denormals.
    FLUSH_TO_ZERO:
        The whole exponent-0 row decodes to zero and tiny results flush
        to signed zero.
    """

    GRADUAL = "gradual"
    FLUSH_TO_ZERO = "flush_to_zero"


@dataclass(frozen=True)
class ModelConfig:
    """Behavioral variant selection for the ALU model.

    Attributes:
        denormal_mode: How the exponent-0 row is interpreted
        div_fraction_bits: Fraction bits retained by the divide quotient
    """

    denormal_mode: DenormalMode = DenormalMode.GRADUAL
    div_fraction_bits: int = DIV_FRACTION_BITS

    def __post_init__(self) -> None:
        """Reject configurations the datapath cannot honor."""
        if not isinstance(self.denormal_mode, DenormalMode):
            raise ConfigurationError(
                f"denormal_mode must be a DenormalMode, got {self.denormal_mode!r}"
            )
        if isinstance(self.div_fraction_bits, bool) or not isinstance(
            self.div_fraction_bits, int
        ):
            raise ConfigurationError(
                f"div_fraction_bits must be an int, got {self.div_fraction_bits!r}"
            )
        if self.div_fraction_bits < SIGNIFICAND_BITS:
            raise ConfigurationError(
                f"div_fraction_bits must be at least {SIGNIFICAND_BITS}, "
                f"got {self.div_fraction_bits}"
            )

    @property
    def gradual_underflow(self) -> bool:
        """True when denormals are representable."""
        return self.denormal_mode is DenormalMode.GRADUAL


DEFAULT_CONFIG = ModelConfig()
FLUSH_TO_ZERO_CONFIG = ModelConfig(denormal_mode=DenormalMode.FLUSH_TO_ZERO)
