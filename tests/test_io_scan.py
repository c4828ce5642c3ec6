"""Tests for directory discovery and the hidden-file check."""

import os
import stat
from pathlib import Path
from types import SimpleNamespace

import pytest

from signerload.core.model import Candidate
from signerload.io import is_hidden, normalise_extension, scan_directory


class TestIsHidden:
    """Test the platform hidden-file check."""

    def test_dot_prefixed_file_is_hidden(self, tmp_path):
        p = tmp_path / ".secret.yaml"
        p.touch()
        assert is_hidden(p) is True

    def test_plain_file_is_visible(self, tmp_path):
        p = tmp_path / "key.yaml"
        p.touch()
        assert is_hidden(p) is False

    def test_accepts_str(self, tmp_path):
        p = tmp_path / ".k.yaml"
        p.touch()
        assert is_hidden(str(p)) is True

    def test_missing_file_is_not_hidden(self, tmp_path):
        assert is_hidden(tmp_path / "gone.yaml") is False

    def test_attribute_query_failure_defaults_to_visible(self, tmp_path, monkeypatch):
        p = tmp_path / "key.yaml"
        p.touch()

        def denied(*args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr("signerload.io.attributes.os.stat", denied)
        assert is_hidden(p) is False

    @pytest.mark.parametrize("attrs", [
        {"st_file_attributes": stat.FILE_ATTRIBUTE_HIDDEN},
        {"st_flags": stat.UF_HIDDEN},
        {"st_file_attributes": stat.FILE_ATTRIBUTE_ARCHIVE | stat.FILE_ATTRIBUTE_HIDDEN, "st_flags": 0},
    ], ids=["windows-hidden-bit", "bsd-uf-hidden", "hidden-bit-among-others"])
    def test_platform_hidden_attribute(self, tmp_path, monkeypatch, attrs):
        p = tmp_path / "key.yaml"
        p.touch()

        monkeypatch.setattr("signerload.io.attributes.os.stat", lambda *a, **kw: SimpleNamespace(**attrs))
        assert is_hidden(p) is True

    def test_platform_attributes_without_hidden_bit(self, tmp_path, monkeypatch):
        p = tmp_path / "key.yaml"
        p.touch()

        monkeypatch.setattr("signerload.io.attributes.os.stat",
                            lambda *a, **kw: SimpleNamespace(st_file_attributes=stat.FILE_ATTRIBUTE_ARCHIVE, st_flags=0))
        assert is_hidden(p) is False


class TestNormaliseExtension:
    """Test extension normalisation."""

    @pytest.mark.parametrize("raw,expected", [("yaml", "yaml"), (".YAML", "yaml"), (" Yml ", "yml")])
    def test_normalised(self, raw, expected):
        assert normalise_extension(raw) == expected

    @pytest.mark.parametrize("raw", ["", ".", "   "])
    def test_empty_rejected(self, raw):
        with pytest.raises(ValueError, match="non-empty"):
            normalise_extension(raw)


class TestScanDirectory:
    """Test candidate discovery."""

    def test_filters_by_extension_case_insensitively(self, tmp_path):
        for name in ("a.yaml", "b.YAML", "c.Yaml", "d.yml", "e.yaml.bak", "fyaml"):
            (tmp_path / name).touch()

        names = sorted(c.path.name for c in scan_directory(tmp_path, "yaml"))

        assert names == ["a.yaml", "b.YAML", "c.Yaml"]

    def test_candidates_carry_path_and_extension(self, tmp_path):
        (tmp_path / "k.yaml").touch()

        assert scan_directory(tmp_path, ".YAML") == [Candidate(tmp_path / "k.yaml", "yaml")]

    def test_hidden_and_directories_excluded(self, tmp_path):
        (tmp_path / ".hidden.yaml").touch()
        (tmp_path / "dir.yaml").mkdir()
        (tmp_path / "visible.yaml").touch()

        assert [c.path.name for c in scan_directory(tmp_path, "yaml")] == ["visible.yaml"]

    def test_not_recursive(self, tmp_path):
        sub = tmp_path / "nested"
        sub.mkdir()
        (sub / "k.yaml").touch()

        assert scan_directory(tmp_path, "yaml") == []

    def test_missing_directory(self, tmp_path):
        assert scan_directory(tmp_path / "nope", "yaml") == []

    def test_file_instead_of_directory(self, tmp_path):
        p = tmp_path / "k.yaml"
        p.touch()
        assert scan_directory(p, "yaml") == []

    def test_unlistable_directory(self, tmp_path, monkeypatch):
        def denied(path):
            raise PermissionError(f"denied: {path}")

        monkeypatch.setattr("signerload.io.scan.os.scandir", denied)
        assert scan_directory(tmp_path, "yaml") == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_to_file_is_candidate(self, tmp_path):
        target = tmp_path / "real.txt"
        target.write_text("x")
        link = tmp_path / "link.yaml"
        try:
            link.symlink_to(target)
        except OSError:
            pytest.skip("cannot create symlink")

        assert [c.path for c in scan_directory(tmp_path, "yaml")] == [Path(link)]
