# SPDX-License-Identifier: MIT
"""Generation request and result values.

A GenerationRequest is built once per resource file per invocation and
yields exactly one GenerationResult. Neither is mutated after creation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from resxgen.core.errors import ResxGenError

# Namespace used when the module name has no dots
GLOBAL_NAMESPACE = "global"

# Target frameworks whose ResourceManager lacks GetObject
_NO_GET_OBJECT_PREFIXES = ("netstandard1.", "netcoreapp1.")


def split_module_name(module_name: str) -> tuple[str, str]:
    """Split a dotted module name into (namespace, module).

    Example:
        split_module_name("A.B.C")  # ("A.B", "C")
        split_module_name("X")      # ("global", "X")
    """
    parts = module_name.split(".")
    if len(parts) == 1:
        return GLOBAL_NAMESPACE, parts[0]
    return ".".join(parts[:-1]), parts[-1]


def supports_get_object(target_framework: str) -> bool:
    """Whether the target framework can look up non-string resources."""
    return not target_framework.startswith(_NO_GET_OBJECT_PREFIXES)


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to generate source for one resource file.

    Attributes:
        resource_path: Path to the .resx file.
        module_name: Dotted name of the generated module.
        generate_legacy_code: Emit literal bindings instead of lookups.
        generate_literals: In legacy mode, make the bindings constants.
        target_framework: Target framework moniker, e.g. "netstandard2.0".
        output_dir: Directory receiving the generated file.
    """

    resource_path: Path
    module_name: str
    generate_legacy_code: bool = False
    generate_literals: bool = True
    target_framework: str = ""
    output_dir: Path = Path(".")

    def __post_init__(self) -> None:
        object.__setattr__(self, "resource_path", Path(self.resource_path))
        object.__setattr__(self, "output_dir", Path(self.output_dir))

    @property
    def base_name(self) -> str:
        """Resource file name without directory or extension."""
        return self.resource_path.stem

    @property
    def namespace(self) -> str:
        return split_module_name(self.module_name)[0]

    @property
    def module(self) -> str:
        return split_module_name(self.module_name)[1]

    @property
    def generate_get_object(self) -> bool:
        return supports_get_object(self.target_framework)

    def source_path(self, extension: str) -> Path:
        """Path of the generated file for a given source extension."""
        return self.output_dir / f"{self.base_name}{extension}"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation.

    Exactly one of ``source_path`` and ``error`` is set.

    Attributes:
        source_path: The generated (or already up-to-date) file.
        error: Why generation failed.
        skipped: True when the existing file was up to date.
    """

    source_path: Path | None = None
    error: ResxGenError | None = None
    skipped: bool = False

    @classmethod
    def success(cls, source_path: Path, *, skipped: bool = False) -> GenerationResult:
        return cls(source_path=source_path, skipped=skipped)

    @classmethod
    def failure(cls, error: ResxGenError) -> GenerationResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.source_path is not None
