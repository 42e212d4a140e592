"""Annotation model - ordered line rules describing one convention"""

from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from annogen.errors import InvalidRuleError
from annogen.models.nodes import kind_name


# Raw rules are 2- or 3-tuples: (selector, template[, options])
Annotation = Sequence[Any]


class LineOptions(BaseModel):
    """Local options of an annotation line"""
    model_config = ConfigDict(extra="forbid")

    # Only generate the line when the selector found nothing
    no_results: bool = False
    # Element types the line applies to (all types when unset)
    type: Optional[List[str]] = None
    before_first_item: Optional[List[str]] = None
    after_each: Optional[str] = None
    # Composite sub-node holding every value-kind of a list selector
    required: Optional[str] = None


class AnnotationLine(BaseModel):
    """A parsed annotation line rule"""
    selector: Union[None, str, List[str]] = None
    template: str
    options: LineOptions = Field(default_factory=LineOptions)

    @field_validator("selector", mode="before")
    @classmethod
    def normalize_selector(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return [kind_name(kind) for kind in v]
        return kind_name(v)

    @property
    def is_composite(self) -> bool:
        """Whether the selector names several value-kinds"""
        return isinstance(self.selector, list)

    def applies_to(self, element_type: str) -> bool:
        """Check the ``type`` restriction against an element type"""
        return self.options.type is None or element_type in self.options.type

    @classmethod
    def from_rule(cls, rule: Any) -> "AnnotationLine":
        """Parse a raw rule tuple (or mapping) into an AnnotationLine"""
        if isinstance(rule, AnnotationLine):
            return rule
        if isinstance(rule, Mapping):
            return cls.model_validate(rule)
        if not isinstance(rule, (list, tuple)) or len(rule) not in (2, 3):
            raise ValueError(f"expected a 2- or 3-item rule, got {rule!r}")
        options = rule[2] if len(rule) == 3 else None
        return cls(
            selector=rule[0],
            template=rule[1],
            options=options if options is not None else {},
        )


def parse_annotation(
    annotation: Annotation, convention: Optional[str] = None
) -> List[AnnotationLine]:
    """Parse every rule of an annotation, in order.

    Raises:
        InvalidRuleError: On the first malformed rule, naming its index
    """
    if isinstance(annotation, (str, bytes, Mapping)) or not isinstance(annotation, Iterable):
        raise InvalidRuleError(
            f"expected a list of rules, got {type(annotation).__name__}",
            convention=convention,
        )

    lines = []
    for index, rule in enumerate(annotation):
        try:
            lines.append(AnnotationLine.from_rule(rule))
        except (ValueError, TypeError) as e:
            raise InvalidRuleError(str(e), convention=convention, rule_index=index) from e
    return lines
