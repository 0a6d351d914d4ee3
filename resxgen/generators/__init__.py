# SPDX-License-Identifier: MIT
"""Source generators for resxgen."""

from resxgen.generators.fsharp import FSharpSourceGenerator
from resxgen.generators.generator import BaseGenerator, Generator

__all__ = [
    "BaseGenerator",
    "FSharpSourceGenerator",
    "Generator",
]
