"""Core functionality for annogen"""

from annogen.core.config import load_settings, save_settings, create_settings, settings_exist, build_templates
from annogen.core.generator import generate
from annogen.core.placement import resolve_placement
from annogen.core.renderer import render_annotation

__all__ = [
    "load_settings",
    "save_settings",
    "create_settings",
    "settings_exist",
    "build_templates",
    "generate",
    "resolve_placement",
    "render_annotation",
]
