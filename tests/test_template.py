"""Tests for the template configuration API"""

import logging

import pytest
from annogen.conventions import lookup, register_convention, unregister_convention
from annogen.errors import AnnogenError, ConventionNotFoundError, TemplateConfigError
from annogen.models.template import AppendConfig, TemplateConfig


CUSTOM = [(None, "- $1")]


@pytest.fixture
def registered():
    """Register a throwaway convention for the duration of a test"""
    register_convention("throwaway", CUSTOM)
    yield "throwaway"
    unregister_convention("throwaway")


def test_defaults():
    """Test a fresh template"""
    template = TemplateConfig()

    assert template.annotation_convention is None
    assert template.use_default_comment is False
    assert template.append is None
    assert template.position is None
    assert template.get_annotation() is None


def test_configure_is_shallow_merge():
    """Test configure() replaces provided keys and keeps the rest"""
    base = TemplateConfig(
        annotation_convention="numpydoc",
        append={"child_name": "comment", "fallback": "block", "disabled": ["file"]},
    )

    result = base.configure({"use_default_comment": True, "append": {"child_name": "block"}})

    assert result.annotation_convention == "numpydoc"  # Kept
    assert result.use_default_comment is True  # Overridden
    # Nested tables are replaced, not merged
    assert result.append == AppendConfig(child_name="block")
    assert result.append.fallback is None
    assert result.append.disabled == []


def test_configure_leaves_receiver_untouched():
    """Test configure() returns a new template"""
    base = TemplateConfig()
    result = base.configure({"annotation_convention": "reST"})

    assert result is not base
    assert base.annotation_convention is None
    assert result.annotation_convention == "reST"


def test_configure_preserves_unknown_keys():
    """Test unknown keys survive configure()"""
    result = TemplateConfig().configure({"my_option": 3})

    assert result.my_option == 3
    assert result.configure({"use_default_comment": True}).my_option == 3


def test_configure_rejects_wrongly_typed_override():
    """Test a badly typed known field raises a domain error"""
    base = TemplateConfig()

    with pytest.raises(TemplateConfigError, match="Invalid template override"):
        base.configure({"append": "after"})

    assert issubclass(TemplateConfigError, AnnogenError)
    assert base.append is None


def test_configure_replaces_attached_convention():
    """Test an override named after an attached convention replaces it"""
    base = TemplateConfig().add_annotation("numpydoc")

    result = base.configure({"numpydoc": CUSTOM, "use_default_comment": True})

    assert result["numpydoc"] is CUSTOM
    assert base["numpydoc"] is lookup("numpydoc")
    assert "numpydoc" not in (result.model_extra or {})
    assert result.use_default_comment is True


def test_add_annotation_loads_builtin():
    """Test add_annotation() attaches a registry convention"""
    template = TemplateConfig().add_annotation("numpydoc")

    assert "numpydoc" in template
    assert template["numpydoc"] is lookup("numpydoc")
    assert template.annotation_convention is None


def test_add_annotation_is_idempotent():
    """Test add_annotation() twice attaches the same definition"""
    template = TemplateConfig()
    first = template.add_annotation("google_docstrings")["google_docstrings"]
    second = template.add_annotation("google_docstrings")["google_docstrings"]

    assert first is second
    assert template.annotation_convention is None


def test_add_annotation_unknown_is_noop():
    """Test unknown convention names are ignored"""
    template = TemplateConfig()
    result = template.add_annotation("does_not_exist")

    assert result is template
    assert "does_not_exist" not in template
    assert template.annotations == {}


def test_add_annotation_uses_registered(registered):
    """Test registered conventions resolve through add_annotation()"""
    template = TemplateConfig().add_annotation(registered)

    assert template[registered] is CUSTOM


def test_add_default_annotation_selects():
    """Test add_default_annotation() selects and attaches"""
    template = TemplateConfig().add_default_annotation("jsdoc")

    assert template.annotation_convention == "jsdoc"
    assert template.get_annotation() is lookup("jsdoc")


def test_add_default_annotation_selects_unknown(caplog):
    """Test an unknown default is still selected"""
    caplog.set_level(logging.WARNING, logger="annogen.models.template")
    template = TemplateConfig().add_default_annotation("does_not_exist")

    assert template.annotation_convention == "does_not_exist"
    assert "does_not_exist" not in template
    assert "not loaded" in caplog.text


def test_add_default_annotation_strict_is_atomic():
    """Test strict mode raises and leaves the template untouched"""
    template = TemplateConfig(annotation_convention="numpydoc")

    with pytest.raises(ConventionNotFoundError, match="does_not_exist"):
        template.add_default_annotation("does_not_exist", strict=True)

    assert template.annotation_convention == "numpydoc"
    assert template.annotations == {}


def test_add_custom_annotation():
    """Test add_custom_annotation() with and without default"""
    template = TemplateConfig()

    template.add_custom_annotation("mine", CUSTOM)
    assert template["mine"] is CUSTOM
    assert template.annotation_convention is None

    template.add_custom_annotation("mine_default", CUSTOM, True)
    assert template.annotation_convention == "mine_default"
    assert template["mine_default"] is CUSTOM


def test_add_custom_annotation_skips_validation():
    """Test malformed rules are accepted at attachment time"""
    template = TemplateConfig().add_custom_annotation("broken", [("only one item",)])

    assert template["broken"] == [("only one item",)]


def test_methods_chain():
    """Test mutators return the template for chaining"""
    template = (
        TemplateConfig()
        .configure({"use_default_comment": True})
        .add_annotation("reST")
        .add_default_annotation("numpydoc")
        .add_custom_annotation("mine", CUSTOM)
    )

    assert template.use_default_comment is True
    assert sorted(template.annotations) == ["mine", "numpydoc", "reST"]
    assert template.annotation_convention == "numpydoc"
