"""Data models for annogen"""

from annogen.models.annotation import Annotation, AnnotationLine, LineOptions, parse_annotation
from annogen.models.nodes import FoundNodes, ValueKind
from annogen.models.render import JumpMarker, Placement, RenderedAnnotation
from annogen.models.settings import FiletypeSettings, Settings
from annogen.models.template import AppendConfig, TemplateConfig

__all__ = [
    "Annotation",
    "AnnotationLine",
    "AppendConfig",
    "FiletypeSettings",
    "FoundNodes",
    "JumpMarker",
    "LineOptions",
    "Placement",
    "RenderedAnnotation",
    "Settings",
    "TemplateConfig",
    "ValueKind",
    "parse_annotation",
]
