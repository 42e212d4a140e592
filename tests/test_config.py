"""Tests for settings loading and template building"""

from pathlib import Path

import pytest
from annogen.conventions import lookup
from annogen.core.config import (
    build_templates,
    create_settings,
    load_settings,
    save_settings,
    settings_exist,
)
from annogen.core.generator import generate
from annogen.errors import ConfigInvalidError, ConfigNotFoundError
from annogen.models.settings import Settings


SETTINGS_YAML = """
filetypes:
  python:
    annotation_convention: numpydoc
    use_default_comment: false
    append: {child_name: comment, fallback: block, position: after, disabled: [file]}
    conventions: [google_docstrings]
  sh:
    annotation_convention: short
    use_default_comment: true
    comment: "# "
custom_conventions:
  sh:
    short:
      - [null, "$1", {type: [func]}]
      - [Parameter, "@arg %s $1", {type: [func]}]
"""


def write_settings(tmp_path: Path, text: str = SETTINGS_YAML) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_settings(tmp_path: Path):
    """Test loading a valid settings file"""
    settings = load_settings(write_settings(tmp_path))

    assert settings.filetypes["python"].annotation_convention == "numpydoc"
    assert settings.filetypes["python"].append.child_name == "comment"
    assert settings.comment_for("sh") == "# "
    assert settings.comment_for("python") is None
    assert settings.comment_for("go") is None


def test_load_settings_missing(tmp_path: Path):
    """Test a missing settings file"""
    with pytest.raises(ConfigNotFoundError, match="annogen init"):
        load_settings(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "filetypes: [not, a, mapping]",
        "filetypes:\n  python:\n    append: {position: sideways, child_name: x}",
        "filetypes: {python: {annotation_convention: [1, 2]}}",
        "key: [unclosed",
    ],
)
def test_load_settings_invalid(tmp_path: Path, text: str):
    """Test invalid settings files raise ConfigInvalidError"""
    with pytest.raises(ConfigInvalidError):
        load_settings(write_settings(tmp_path, text))


def test_save_and_create_settings(tmp_path: Path):
    """Test create_settings() writes a loadable file"""
    path = tmp_path / ".annogen" / "config.yaml"
    assert not settings_exist(path)

    created = create_settings(path)

    assert settings_exist(path)
    assert load_settings(path) == created


def test_save_settings_round_trip(tmp_path: Path):
    """Test saving keeps custom conventions"""
    settings = load_settings(write_settings(tmp_path))
    path = save_settings(settings, tmp_path / "copy.yaml")

    assert load_settings(path).custom_conventions == settings.custom_conventions


def test_build_templates(tmp_path: Path):
    """Test templates built from settings"""
    templates = build_templates(load_settings(write_settings(tmp_path)))

    python = templates["python"]
    assert python.annotation_convention == "numpydoc"
    assert python["numpydoc"] is lookup("numpydoc")
    assert python["google_docstrings"] is lookup("google_docstrings")
    assert python.append.disabled == ["file"]

    sh = templates["sh"]
    assert sh.annotation_convention == "short"
    assert sh.use_default_comment is True
    assert sh["short"][1] == ["Parameter", "@arg %s $1", {"type": ["func"]}]


def test_build_templates_custom_only_filetype():
    """Test custom conventions create a template for unlisted filetypes"""
    settings = Settings(custom_conventions={"go": {"godoc": [[None, "// $1"]]}})

    templates = build_templates(settings)

    assert templates["go"].annotation_convention is None
    assert "godoc" in templates["go"]


def test_generate_from_settings(tmp_path: Path):
    """Test generating with a template built from settings"""
    settings = load_settings(write_settings(tmp_path))
    sh = build_templates(settings)["sh"]

    rendered = generate(sh, "func", {"Parameter": ["name"]}, comment=settings.comment_for("sh"))

    assert rendered.lines == ["# ", "# @arg name "]
    assert [(m.line, m.col) for m in rendered.markers] == [(0, 2), (1, 12)]
    assert rendered.placement.kind == "default"
