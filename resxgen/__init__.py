# SPDX-License-Identifier: MIT
"""
resxgen: generate typed source accessors from .resx resource files.

Each resource file becomes one F# module with an accessor per entry,
regenerated only when the resource file is newer than the output.
"""

from __future__ import annotations

# Re-export commonly used classes for convenient imports
from resxgen.batch import BatchResult, embed_resx_source
from resxgen.core.item import ResourceItem
from resxgen.core.request import GenerationRequest, GenerationResult
from resxgen.core.resource import ResourceEntry, load_entries
from resxgen.generators.fsharp import FSharpSourceGenerator

__version__ = "0.1.0"


def generate(request: GenerationRequest) -> GenerationResult:
    """Generate F# source for a single resource file."""
    return FSharpSourceGenerator().generate(request)


# Public API exports
__all__ = [
    # Version
    "__version__",
    # Single file
    "generate",
    "GenerationRequest",
    "GenerationResult",
    "ResourceEntry",
    "load_entries",
    "FSharpSourceGenerator",
    # Batch
    "embed_resx_source",
    "BatchResult",
    "ResourceItem",
]
