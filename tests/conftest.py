# SPDX-License-Identifier: MIT
"""Shared fixtures for resxgen tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

RESX_HEADER = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
"""


def resx_text(*data: str) -> str:
    """Wrap data element snippets in a minimal resx document."""
    return RESX_HEADER + "\n".join(data) + "\n</root>\n"


@pytest.fixture
def write_resx(tmp_path: Path) -> Callable[..., Path]:
    """Return a function writing a resx file into tmp_path."""

    def _write(name: str, *data: str) -> Path:
        path = tmp_path / name
        path.write_text(resx_text(*data), encoding="utf-8")
        return path

    return _write
