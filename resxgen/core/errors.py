# SPDX-License-Identifier: MIT
"""Custom exceptions for resxgen.

All resxgen exceptions inherit from ResxGenError, which includes
the optional path of the file being processed for better error messages.
"""

from __future__ import annotations

from pathlib import Path


class ResxGenError(Exception):
    """Base class for all resxgen exceptions.

    Attributes:
        message: The error message.
        path: Optional path of the file the error relates to.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
    ) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigureError(ResxGenError):
    """Error while loading a batch manifest or its settings."""


class MetadataError(ResxGenError):
    """Resource item metadata has an unexpected value.

    Attributes:
        name: The metadata name.
        value: The offending value.
    """

    def __init__(
        self,
        name: str,
        value: str,
        path: Path | str | None = None,
    ) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Expected boolean value for '{name}' found '{value}'", path)


class ResourceError(ResxGenError):
    """Error reading a resource document."""


class MalformedDocumentError(ResourceError):
    """Resource document is unreadable or not well formed."""


class MissingResourceNameError(ResourceError):
    """A data element has no (or an empty) name attribute.

    Attributes:
        element: Serialized form of the offending element.
    """

    def __init__(
        self,
        element: str,
        path: Path | str | None = None,
    ) -> None:
        self.element = element
        super().__init__(f"Missing resource name on element '{element}'", path)


class MissingResourceValueError(ResourceError):
    """A data element has no value child.

    Attributes:
        name: The resource name.
    """

    def __init__(
        self,
        name: str,
        path: Path | str | None = None,
    ) -> None:
        self.name = name
        super().__init__(f"Missing resource value for '{name}'", path)


class GenerateError(ResxGenError):
    """Error during the generate phase."""


class WriteFailureError(GenerateError):
    """Generated source could not be written."""
