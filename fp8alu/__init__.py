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


"""FP8 ALU reference model.

This package provides a bit-exact software model of an 8-bit minifloat
ALU: given two 8-bit encodings and a 3-bit selector it computes the 8-bit
result and the overflow, underflow, zero and invalid-operation flags the
hardware produces.

Package Structure
-----------------

Subpackages:
    models
        Format codec, alignment/normalization primitives, arithmetic and
        logic models, and the ``evaluate`` dispatcher

    encoders
        Operation tables and stimulus/response word packing for
        reference vectors

    utils
        Bit helpers, structured logging and validation assertions

Modules:
    config
        Format constants and the ``ModelConfig`` variant selection

    fp8_types
        Type aliases, the ``AluOp`` selector and the ``AluResult`` value

    exceptions
        Exception hierarchy for encoding, configuration and mismatches

Quick Start
-----------
::

    from fp8alu import AluOp, decode, encode, evaluate

    out = evaluate(encode(2.75), encode(1.25), AluOp.ADD)
    decode(out.result)  # 4.0
"""

# Re-export the public surface for convenience
from fp8alu.config import DEFAULT_CONFIG, DenormalMode, ModelConfig
from fp8alu.fp8_types import AluFlags, AluOp, AluResult, FP8Bits
from fp8alu.models.alu_model import evaluate
from fp8alu.models.fp8_codec import decode, encode

__all__ = [
    "DEFAULT_CONFIG",
    "DenormalMode",
    "ModelConfig",
    "AluFlags",
    "AluOp",
    "AluResult",
    "FP8Bits",
    "evaluate",
    "decode",
    "encode",
]
