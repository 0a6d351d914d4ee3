# SPDX-License-Identifier: MIT
"""Resource document (.resx) reading.

A resource document is XML with one ``data`` element per entry:

    <data name="Greeting" xml:space="preserve">
      <value>Hello, world</value>
    </data>
    <data name="Logo" type="System.Drawing.Bitmap, System.Drawing">
      <value>iVBORw0KGgo...</value>
    </data>

Only the name, the value text and the presence of a ``type`` attribute
are extracted; the rest of the schema is ignored.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from resxgen.core.errors import (
    MalformedDocumentError,
    MissingResourceNameError,
    MissingResourceValueError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceEntry:
    """One named resource extracted from a document.

    Attributes:
        name: Resource name, as looked up at runtime.
        value: Resource value with surrounding whitespace removed.
        has_type_attribute: True for typed (non-string) resources such as
            images or byte arrays.
    """

    name: str
    value: str
    has_type_attribute: bool = False

    @property
    def is_string(self) -> bool:
        return not self.has_type_attribute

    @property
    def identifier(self) -> str:
        return make_identifier(self.name)


def make_identifier(name: str) -> str:
    """Derive the generated identifier for a resource name.

    Names starting with something other than a letter or underscore are
    prefixed with ``_``. Nothing else in the name is altered.
    """
    if name[0].isalpha() or name[0] == "_":
        return name
    return "_" + name


def parse_document(path: Path | str) -> ET.Element:
    """Parse a resource document and return its root element.

    Raises:
        MalformedDocumentError: If the file can't be read or isn't well formed.
    """
    path = Path(path)
    try:
        logger.debug("Parsing resource document: %s", path)
        return ET.parse(path).getroot()
    except ET.ParseError as e:
        raise MalformedDocumentError(f"Malformed XML: {e}", path) from e
    except OSError as e:
        raise MalformedDocumentError(f"Cannot read document: {e}", path) from e
    except (LookupError, ValueError) as e:
        # Unknown or unsupported encoding declarations
        raise MalformedDocumentError(f"Cannot decode document: {e}", path) from e


def entry_from_element(node: ET.Element, path: Path | str | None = None) -> ResourceEntry:
    """Extract a ResourceEntry from one ``data`` element.

    Raises:
        MissingResourceNameError: If the name attribute is absent or empty.
        MissingResourceValueError: If there is no ``value`` child.
    """
    name = node.get("name")
    if not name:
        raise MissingResourceNameError(ET.tostring(node, encoding="unicode").strip(), path)

    value_element = node.find("value")
    if value_element is None:
        raise MissingResourceValueError(name, path)

    # Element value is the concatenated text of all its descendants
    value = "".join(value_element.itertext()).strip()
    return ResourceEntry(
        name=name,
        value=value,
        has_type_attribute=node.get("type") is not None,
    )


def load_entries(path: Path | str) -> list[ResourceEntry]:
    """Load all resource entries of a document, in document order.

    Args:
        path: Path to the .resx file.

    Returns:
        One entry per ``data`` element.

    Raises:
        ResourceError: If the document or one of its entries is invalid.
    """
    root = parse_document(path)
    entries = [entry_from_element(node, path) for node in root.iterfind(".//data")]
    warn_duplicate_identifiers(entries, path)
    return entries


def warn_duplicate_identifiers(
    entries: list[ResourceEntry], path: Path | str | None = None
) -> list[str]:
    """Log a warning for identifiers generated more than once.

    Duplicates don't stop generation; the compiler of the generated
    source reports the clash.

    Returns:
        The duplicated identifiers, sorted.
    """
    counts = Counter(entry.identifier for entry in entries)
    duplicates = sorted(ident for ident, count in counts.items() if count > 1)
    for ident in duplicates:
        logger.warning("%s: identifier '%s' is generated %d times", path, ident, counts[ident])
    return duplicates
