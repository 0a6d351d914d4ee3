# SPDX-License-Identifier: MIT
"""Tests for resxgen CLI."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

from resxgen.cli import main, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_normal(self) -> None:
        """Test normal logging setup."""
        # Just ensure it doesn't crash
        setup_logging(verbose=False, debug=False)

    def test_setup_logging_verbose(self) -> None:
        """Test verbose logging setup."""
        setup_logging(verbose=True, debug=False)

    def test_setup_logging_debug(self) -> None:
        """Test debug logging setup."""
        setup_logging(verbose=False, debug=True)


class TestCLICommands:
    """Tests for CLI commands run as a subprocess."""

    def test_resxgen_help(self) -> None:
        """Test resxgen --help."""
        result = subprocess.run(
            [sys.executable, "-m", "resxgen.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "resxgen" in result.stdout
        assert "generate" in result.stdout
        assert "info" in result.stdout

    def test_resxgen_version(self) -> None:
        """Test resxgen --version."""
        result = subprocess.run(
            [sys.executable, "-m", "resxgen.cli", "--version"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "0.1.0" in result.stdout

    def test_generate_no_resources(self, tmp_path: Path) -> None:
        """Test resxgen generate without resource files."""
        result = subprocess.run(
            [sys.executable, "-m", "resxgen.cli", "generate"],
            capture_output=True,
            text=True,
            cwd=tmp_path,
        )
        assert result.returncode != 0
        assert "No resource files given" in result.stderr

    def test_generate_missing_manifest(self, tmp_path: Path) -> None:
        """Test resxgen generate with a manifest that doesn't exist."""
        result = subprocess.run(
            [sys.executable, "-m", "resxgen", "generate", "--manifest", "nope.json"],
            capture_output=True,
            text=True,
            cwd=tmp_path,
        )
        assert result.returncode != 0
        assert "Manifest not found" in result.stderr


class TestGenerateCommand:
    """Tests for 'resxgen generate' run in-process."""

    def test_generate_files(self, write_resx, tmp_path: Path, capsys) -> None:
        resx = write_resx("Strings.resx", '<data name="abc"><value>Hello</value></data>')
        out = tmp_path / "obj"

        code = main(["generate", str(resx), "-o", str(out), "-f", "net8.0", "-m", "My.SR"])

        assert code == 0
        generated = out / "Strings.fs"
        assert str(generated) in capsys.readouterr().out
        text = generated.read_text()
        assert "namespace My\n" in text
        assert "module internal SR =" in text
        assert 'let abc() = GetString("abc")' in text

    def test_legacy_flags(self, write_resx, tmp_path: Path) -> None:
        resx = write_resx("Strings.resx", '<data name="abc"><value>Hello</value></data>')
        out = tmp_path / "obj"

        code = main(["generate", str(resx), "-o", str(out), "--legacy", "--no-literals"])

        assert code == 0
        text = (out / "Strings.fs").read_text()
        assert '    let abc = "abc"\n' in text
        assert "[<Literal>]" not in text

    def test_target_framework_from_environment(
        self, write_resx, tmp_path: Path, monkeypatch
    ) -> None:
        monkeypatch.setenv("RESXGEN_TARGET_FRAMEWORK", "netcoreapp1.1")
        resx = write_resx("Strings.resx", '<data name="abc"><value>Hello</value></data>')
        out = tmp_path / "obj"

        assert main(["generate", str(resx), "-o", str(out)]) == 0
        assert "GetObject" not in (out / "Strings.fs").read_text()

    def test_failure_exit_code(self, write_resx, tmp_path: Path) -> None:
        good = write_resx("Good.resx", '<data name="abc"><value>Hello</value></data>')
        bad = write_resx("Bad.resx", "<data><value>orphan</value></data>")
        out = tmp_path / "obj"

        code = main(["generate", str(good), str(bad), "-o", str(out)])

        assert code == 1
        assert (out / "Good.fs").exists()
        assert not (out / "Bad.fs").exists()

    def test_manifest(self, write_resx, tmp_path: Path, capsys) -> None:
        write_resx("Strings.resx", '<data name="abc"><value>Hello</value></data>')
        write_resx("Skipped.resx", '<data name="x"><value>y</value></data>')
        manifest = tmp_path / "resources.json"
        manifest.write_text(
            json.dumps(
                {
                    "output_dir": "gen",
                    "target_framework": "net8.0",
                    "resources": [
                        {"path": "Strings.resx", "GenerateSource": "true"},
                        {"path": "Skipped.resx"},
                    ],
                }
            )
        )

        code = main(["generate", "--manifest", str(manifest)])

        assert code == 0
        assert (tmp_path / "gen" / "Strings.fs").exists()
        assert not (tmp_path / "gen" / "Skipped.fs").exists()

    def test_bad_manifest_metadata(self, write_resx, tmp_path: Path) -> None:
        write_resx("Strings.resx", '<data name="abc"><value>Hello</value></data>')
        manifest = tmp_path / "resources.json"
        manifest.write_text(
            json.dumps({"resources": [{"path": "Strings.resx", "GenerateSource": "yes"}]})
        )

        assert main(["generate", "--manifest", str(manifest)]) == 1

    def test_wrong_manifest_shape(self, tmp_path: Path) -> None:
        manifest = tmp_path / "resources.json"
        manifest.write_text(json.dumps({"resources": [{"path": 5}]}))

        assert main(["generate", "--manifest", str(manifest)]) == 1


class TestInfoCommand:
    def test_lists_entries(self, write_resx, capsys) -> None:
        resx = write_resx(
            "Strings.resx",
            '<data name="1st"><value>First line\nSecond line</value></data>',
            '<data name="Logo" type="System.Byte[], mscorlib"><value>AAEC</value></data>',
        )

        assert main(["info", str(resx)]) == 0

        out = capsys.readouterr().out
        assert "Entries: 2" in out
        assert "_1st" in out
        assert "First line" in out
        assert "Second line" not in out
        assert "typed" in out

    def test_malformed(self, tmp_path: Path) -> None:
        bad = tmp_path / "Bad.resx"
        bad.write_text("<root>")
        assert main(["info", str(bad)]) == 1

    def test_no_command(self) -> None:
        assert main([]) == 1
