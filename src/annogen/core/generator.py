"""Annotation generator - renders a template's selected convention"""

import logging
from typing import Any, Mapping, Optional, Union

from annogen.core.placement import resolve_placement
from annogen.core.renderer import render_annotation
from annogen.errors import ConventionNotFoundError
from annogen.models.nodes import FoundNodes
from annogen.models.render import RenderedAnnotation
from annogen.models.template import TemplateConfig

logger = logging.getLogger(__name__)


def generate(
    template: TemplateConfig,
    element_type: str,
    found: Union[FoundNodes, Mapping[str, Any], None] = None,
    node: Optional[Any] = None,
    comment: Optional[str] = None,
    convention: Optional[str] = None,
    trailing_after_each: bool = True,
) -> RenderedAnnotation:
    """Generate the annotation for one code element.

    Args:
        template: Filetype template holding the attached conventions
        element_type: Type tag of the element
        found: Values discovered for the element
        node: Host node handle, passed to the template's position function
        comment: Filetype comment token, used when use_default_comment is set
        convention: Convention to use instead of the selected one
        trailing_after_each: See render_annotation()

    Raises:
        ConventionNotFoundError: If no convention is attached under the name
        InvalidRuleError: If the convention holds a malformed rule
    """
    name = convention or template.annotation_convention
    if name is None:
        raise ConventionNotFoundError(None)

    annotation = template.get_annotation(name)
    if annotation is None:
        raise ConventionNotFoundError(name)

    rendered = render_annotation(
        annotation,
        element_type,
        found,
        convention=name,
        trailing_after_each=trailing_after_each,
    )

    if template.use_default_comment and comment:
        rendered = rendered.with_prefix(comment)

    rendered.placement = resolve_placement(template, element_type, node)
    logger.debug("Placement for %s: %s", element_type, rendered.placement.kind)
    return rendered
