# SPDX-License-Identifier: MIT
"""Tests for the top-level resxgen API."""

import resxgen
from resxgen import GenerationRequest


def test_version():
    assert resxgen.__version__ == "0.1.0"


def test_generate(write_resx, tmp_path):
    resx = write_resx("Errors.resx", '<data name="NotFound"><value>Not found</value></data>')
    result = resxgen.generate(
        GenerationRequest(resx, "App.Errors", output_dir=tmp_path / "obj")
    )
    assert result.ok
    text = result.source_path.read_text()
    assert "namespace App\n" in text
    assert "/// <summary>Not found</summary>" in text
