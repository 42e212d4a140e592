"""Placement resolution - where the host inserts a rendered annotation"""

from typing import Any, Optional

from annogen.models.render import Placement
from annogen.models.template import TemplateConfig


def resolve_placement(
    template: TemplateConfig, element_type: str, node: Optional[Any] = None
) -> Placement:
    """Resolve placement for an element.

    A ``position`` function wins when it returns coordinates; then the
    ``append`` directive unless the element type is disabled; otherwise the
    host's default placement.
    """
    if template.position is not None:
        result = template.position(node, element_type)
        if result is not None:
            row, col = result
            if row is not None and col is not None:
                return Placement(kind="position", row=row, col=col)

    append = template.append
    if append is not None and append.applies_to(element_type):
        return Placement(
            kind="append",
            child_name=append.child_name,
            fallback=append.fallback,
            relative=append.position,
        )

    return Placement()
