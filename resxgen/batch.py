# SPDX-License-Identifier: MIT
"""Batch driver: generate source for every enabled resource item.

Items are processed one at a time in input order. A file that fails to
generate marks the whole batch as failed, but the remaining items are
still attempted and their generated files stay valid.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from resxgen.core.item import ResourceItem
from resxgen.core.request import GenerationRequest
from resxgen.generators.fsharp import FSharpSourceGenerator
from resxgen.generators.generator import Generator

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of a batch.

    Attributes:
        success: False if any enabled item failed.
        generated_sources: Generated file paths, in item order.
    """

    success: bool = True
    generated_sources: list[Path] = field(default_factory=list)


def make_request(
    item: ResourceItem, output_dir: Path | str, target_framework: str
) -> GenerationRequest:
    """Build the generation request for one item from its metadata."""
    return GenerationRequest(
        resource_path=item.item_spec,
        module_name=item.module_name,
        generate_legacy_code=item.generate_legacy_code,
        generate_literals=item.generate_literals,
        target_framework=target_framework,
        output_dir=Path(output_dir),
    )


def embed_resx_source(
    items: Iterable[ResourceItem],
    output_dir: Path | str,
    target_framework: str = "",
    generator: Generator | None = None,
) -> BatchResult:
    """Generate source for each item with GenerateSource set.

    Args:
        items: Resource items, processed in order.
        output_dir: Directory for generated files.
        target_framework: Target framework moniker.
        generator: Generator to use (default: F#).

    Returns:
        The aggregate result.

    Raises:
        MetadataError: If an item has a malformed boolean metadata value.
            This aborts the remaining items.
    """
    if generator is None:
        generator = FSharpSourceGenerator()

    result = BatchResult()
    for item in items:
        if not item.generate_source:
            logger.debug("Not generating source for %s", item.item_spec)
            continue
        request = make_request(item, output_dir, target_framework)
        generated = generator.generate(request)
        if generated.source_path is not None:
            result.generated_sources.append(generated.source_path)
        else:
            result.success = False

    if not result.success:
        logger.warning("Source generation failed for one or more resource files")
    return result
