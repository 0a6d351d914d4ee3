# SPDX-License-Identifier: MIT
"""Generator protocol for resource source generation.

Generators take a GenerationRequest and produce one source file
exposing the resources of a .resx document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from resxgen.core.errors import GenerateError, ResxGenError, WriteFailureError
from resxgen.core.node import FileNode
from resxgen.core.request import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


@runtime_checkable
class Generator(Protocol):
    """Protocol for resource source generators.

    A Generator turns one resource file into one source file. Different
    generators produce different languages.
    """

    @property
    def name(self) -> str:
        """Generator name (e.g., 'fsharp')."""
        ...

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Generate source for a resource file.

        Args:
            request: What to generate and where.

        Returns:
            Success with the source path, or failure.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality.

    Subclasses set ``extension`` and implement ``render``. ``generate``
    handles the up-to-date check, writing, logging and turning errors into
    a failure result.
    """

    extension = ""

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def render(self, request: GenerationRequest) -> str:
        """Return the generated source text. Subclasses must implement."""
        raise NotImplementedError

    def output_node(self, request: GenerationRequest) -> FileNode:
        """The generated file, depending on the resource file."""
        return FileNode(
            request.source_path(self.extension),
            dependencies=[FileNode(request.resource_path)],
        )

    def generate(self, request: GenerationRequest) -> GenerationResult:
        output = self.output_node(request)
        source_path = output.path
        try:
            if output.is_up_to_date():
                logger.info("Skipping generation: '%s' since it is up-to-date.", source_path)
                return GenerationResult.success(source_path, skipped=True)

            logger.info("Generating code for target framework %s", request.target_framework)
            text = self.render(request)
            logger.info("Generating: %s", source_path)
            self._write(source_path, text)
            logger.info("Done: %s", source_path)
            return GenerationResult.success(source_path)
        except Exception as e:
            logger.error(
                "An exception occurred when processing '%s'\n%s", request.resource_path, e
            )
            error = e
            if not isinstance(error, ResxGenError):
                error = GenerateError(f"{type(e).__name__}: {e}", request.resource_path)
            return GenerationResult.failure(error)

    def _write(self, path: Path, text: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Keep line endings exactly as rendered
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise WriteFailureError(f"Cannot write generated source: {e}", path) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
