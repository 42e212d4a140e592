"""Template model - per-filetype annotation configuration"""

import logging
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from annogen.conventions import lookup
from annogen.errors import ConventionNotFoundError, TemplateConfigError
from annogen.models.annotation import Annotation

logger = logging.getLogger(__name__)


# position(node, element_type) -> (row, col), or None for default positioning
PositionFunc = Callable[[Any, str], Any]


class AppendConfig(BaseModel):
    """Custom placement of the annotation relative to a child node"""
    child_name: str
    fallback: Optional[str] = None
    position: Literal["before", "after"] = "after"
    disabled: List[str] = Field(default_factory=list)

    def applies_to(self, element_type: str) -> bool:
        """Whether custom placement is enabled for an element type"""
        return element_type not in self.disabled


class TemplateConfig(BaseModel):
    """Annotation configuration of one filetype.

    Holds the attached annotation conventions (``template[name]``), the
    selected one, and how the rendered annotation is placed. Unknown keys
    are kept as extra attributes.

    Example:
        TemplateConfig().configure({"use_default_comment": True}).add_default_annotation("numpydoc")
    """
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    annotation_convention: Optional[str] = None
    use_default_comment: bool = False
    append: Optional[AppendConfig] = None
    position: Optional[PositionFunc] = None
    annotations: Dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> Annotation:
        return self.annotations[name]

    def __contains__(self, name: object) -> bool:
        return name in self.annotations

    def configure(self, overrides: Mapping[str, Any]) -> "TemplateConfig":
        """Shallow-merge ``overrides`` into a new template.

        A provided key fully replaces the current value, nested tables
        included. A key naming an attached convention replaces that
        convention. The receiver is left untouched.

        Raises:
            TemplateConfigError: If a known field gets a value of the wrong type
        """
        data = dict(self)
        annotations = dict(self.annotations)
        for key, value in overrides.items():
            if key in annotations:
                annotations[key] = value
            else:
                data[key] = value
        if "annotations" not in overrides:
            data["annotations"] = annotations

        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            raise TemplateConfigError(f"Invalid template override: {e}") from e

    def add_annotation(self, name: str) -> "TemplateConfig":
        """Attach a convention from the registry.

        Unknown names are ignored: the template is returned unchanged.
        """
        annotation = lookup(name)
        if annotation is None:
            logger.debug("Annotation convention '%s' not found, skipping", name)
            return self

        self.annotations[name] = annotation
        return self

    def add_default_annotation(self, name: str, strict: bool = False) -> "TemplateConfig":
        """Attach a convention from the registry and select it.

        The convention is selected even when it can't be loaded. Pass
        ``strict=True`` to fail atomically instead.

        Raises:
            ConventionNotFoundError: In strict mode, if ``name`` is unknown
        """
        if strict:
            annotation = lookup(name)
            if annotation is None:
                raise ConventionNotFoundError(name)
            self.annotations[name] = annotation
            self.annotation_convention = name
            return self

        self.annotation_convention = name
        self.add_annotation(name)
        if name not in self.annotations:
            logger.warning("Default annotation convention '%s' selected but not loaded", name)
        return self

    def add_custom_annotation(
        self, name: str, annotation: Annotation, default: bool = False
    ) -> "TemplateConfig":
        """Attach a caller-supplied convention, optionally selecting it.

        The rules are not validated here; malformed ones fail at render time.
        """
        if default is True:
            self.annotation_convention = name

        self.annotations[name] = annotation
        return self

    def get_annotation(self, name: Optional[str] = None) -> Optional[Annotation]:
        """Get an attached convention (the selected one by default)"""
        if name is None:
            name = self.annotation_convention
        if name is None:
            return None
        return self.annotations.get(name)
