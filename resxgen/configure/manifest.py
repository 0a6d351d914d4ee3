# SPDX-License-Identifier: MIT
"""Batch manifests for resxgen.

A manifest is a JSON file describing a batch: where to write generated
sources, the target framework, and the resource items with their
metadata.

Example:
    {
      "output_dir": "obj",
      "target_framework": "netstandard2.0",
      "resources": [
        {"path": "FSComp.resx", "GenerateSource": "true",
         "GeneratedModuleName": "FSharp.Compiler.SR"}
      ]
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from resxgen.core.errors import ConfigureError
from resxgen.core.item import ResourceItem

DEFAULT_OUTPUT_DIR = "obj"


def get_default(name: str, default: str | None = None) -> str | None:
    """Get a batch setting from the environment.

    RESXGEN_TARGET_FRAMEWORK and RESXGEN_OUTPUT_DIR fill in settings the
    command line doesn't give.

    Args:
        name: Setting name without prefix, e.g. "TARGET_FRAMEWORK".
        default: Value if the variable is unset or empty.
    """
    return os.environ.get(f"RESXGEN_{name}") or default


def _metadata_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Manifest:
    """A batch description.

    Attributes:
        output_dir: Directory for generated files.
        target_framework: Target framework moniker.
        items: Resource items, in order.
    """

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    target_framework: str = ""
    items: list[ResourceItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, base_dir: Path | str = ".") -> Manifest:
        """Build a manifest from parsed JSON.

        Relative paths are resolved against ``base_dir``.

        Raises:
            ConfigureError: If the data doesn't have the expected shape.
        """
        if not isinstance(data, dict):
            raise ConfigureError("manifest must be a JSON object")
        base_dir = Path(base_dir)

        resources = data.get("resources", [])
        if not isinstance(resources, list):
            raise ConfigureError("'resources' must be a list")

        items: list[ResourceItem] = []
        for index, entry in enumerate(resources):
            if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
                raise ConfigureError(f"resource #{index} must be an object with a 'path'")
            metadata = {
                key: _metadata_value(value) for key, value in entry.items() if key != "path"
            }
            items.append(ResourceItem(base_dir / entry["path"], metadata))

        output_dir = data.get("output_dir", DEFAULT_OUTPUT_DIR)
        if not isinstance(output_dir, str):
            raise ConfigureError("'output_dir' must be a string")
        return cls(
            output_dir=base_dir / output_dir,
            target_framework=str(data.get("target_framework", "")),
            items=items,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_dir": str(self.output_dir),
            "target_framework": self.target_framework,
            "resources": [
                {"path": str(item.item_spec), **item.metadata} for item in self.items
            ],
        }

    def save(self, path: Path | str) -> None:
        """Save the manifest as JSON.

        Args:
            path: Destination file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
            f.write("\n")


def load_manifest(path: Path | str) -> Manifest:
    """Load a batch manifest.

    Args:
        path: Path to the manifest file.

    Returns:
        The manifest, with paths resolved against its directory.

    Raises:
        FileNotFoundError: If the manifest doesn't exist.
        ConfigureError: If it isn't valid JSON or has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigureError(f"invalid JSON: {e}", path) from e

    try:
        return Manifest.from_dict(data, base_dir=path.parent)
    except ConfigureError as e:
        raise ConfigureError(e.message, path) from e
