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


"""Encoders for driving and checking an FP8 ALU.

Modules
-------
op_tables
    Mnemonic registry: mnemonic -> (stimulus encoder, evaluator)

vector_encode
    Stimulus and response word packing, reference vector lines

Usage
-----
::

    from fp8alu.encoders.op_tables import ALU_OPS

    encoder, evaluator = ALU_OPS["div"]
    stimulus = encoder(a=0x48, b=0x40)
    expected = evaluator(0x48, 0x40)
"""

from fp8alu.encoders.op_tables import ALU_OPS, ARITHMETIC_OPS, LOGIC_OPS
from fp8alu.encoders.vector_encode import enc_response, enc_stimulus

__all__ = [
    "ALU_OPS",
    "ARITHMETIC_OPS",
    "LOGIC_OPS",
    "enc_response",
    "enc_stimulus",
]
