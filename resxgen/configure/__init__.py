# SPDX-License-Identifier: MIT
"""Batch configuration for resxgen."""

from resxgen.configure.manifest import Manifest, get_default, load_manifest

__all__ = ["Manifest", "get_default", "load_manifest"]
