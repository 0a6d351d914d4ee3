# SPDX-License-Identifier: MIT
"""Resource items: a resource file path plus string metadata.

Items describe what a batch should do with each resource file. Metadata
values are strings, as they come from a project file or manifest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from resxgen.core.errors import MetadataError

GENERATE_SOURCE = "GenerateSource"
GENERATED_MODULE_NAME = "GeneratedModuleName"
GENERATE_LEGACY_CODE = "GenerateLegacyCode"
GENERATE_LITERALS = "GenerateLiterals"


@dataclass
class ResourceItem:
    """A resource file taking part in a batch.

    Attributes:
        item_spec: Path to the resource file.
        metadata: Metadata name to string value.
    """

    item_spec: Path
    metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.item_spec = Path(self.item_spec)

    def get_metadata(self, name: str) -> str:
        """Get a metadata value, or an empty string if unset."""
        return self.metadata.get(name) or ""

    def get_boolean_metadata(self, name: str, default: bool) -> bool:
        """Get a metadata value as a boolean.

        Blank or missing values give ``default``; "true" and "false" are
        accepted in any case.

        Raises:
            MetadataError: For any other value.
        """
        value = self.get_metadata(name)
        if not value.strip():
            return default
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise MetadataError(name, value, self.item_spec)

    @property
    def generate_source(self) -> bool:
        return self.get_boolean_metadata(GENERATE_SOURCE, False)

    @property
    def generate_legacy_code(self) -> bool:
        return self.get_boolean_metadata(GENERATE_LEGACY_CODE, False)

    @property
    def generate_literals(self) -> bool:
        return self.get_boolean_metadata(GENERATE_LITERALS, True)

    @property
    def module_name(self) -> str:
        """Explicit GeneratedModuleName, or the resource file's base name."""
        return self.get_metadata(GENERATED_MODULE_NAME) or self.item_spec.stem
