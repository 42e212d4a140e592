"""Annotation renderer - turns line rules and found nodes into text lines"""

import logging
import re
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from annogen.errors import InvalidRuleError
from annogen.models.annotation import Annotation, AnnotationLine, parse_annotation
from annogen.models.nodes import FoundNodes
from annogen.models.render import JumpMarker, RenderedAnnotation

logger = logging.getLogger(__name__)

JUMP_MARKER = "$1"

_TOKEN_RE = re.compile(r"%s|%%|\$1")


def render_annotation(
    annotation: Annotation,
    element_type: str,
    found: Union[FoundNodes, Mapping[str, Any], None] = None,
    convention: Optional[str] = None,
    trailing_after_each: bool = True,
) -> RenderedAnnotation:
    """Render an annotation for one code element.

    Rules are evaluated in order and every matching rule contributes lines:
    once per discovered instance, or once when ``no_results`` is set and
    nothing was found. ``%s`` slots are filled positionally from the
    instance's values, and each ``$1`` is removed and recorded as a jump
    marker.

    Args:
        annotation: Ordered rule list of the convention
        element_type: Type tag of the element (e.g. "func", "class", "file")
        found: Discovered values, as FoundNodes or a plain mapping
        convention: Convention name, used in error messages
        trailing_after_each: Keep the ``after_each`` line after the last instance

    Returns:
        RenderedAnnotation with lines and jump markers

    Raises:
        InvalidRuleError: If a rule is malformed; nothing is rendered
    """
    if found is None:
        found = FoundNodes()
    elif not isinstance(found, FoundNodes):
        found = FoundNodes.from_mapping(found)

    rules = parse_annotation(annotation, convention)
    lines: List[str] = []
    markers: List[JumpMarker] = []

    def emit(template: str, values: Optional[Sequence[str]]) -> None:
        text, columns = fill_template(template, values)
        markers.extend(JumpMarker(line=len(lines), col=col) for col in columns)
        lines.append(text)

    for index, rule in enumerate(rules):
        if not rule.applies_to(element_type):
            continue

        instances = _firings(rule, found)
        if not instances:
            continue

        opts = rule.options
        try:
            if not opts.no_results:
                for header in opts.before_first_item or []:
                    emit(header, None)
            for n, values in enumerate(instances):
                emit(rule.template, values)
                if opts.after_each is not None:
                    if trailing_after_each or n < len(instances) - 1:
                        emit(opts.after_each, None)
        except ValueError as e:
            raise InvalidRuleError(str(e), convention=convention, rule_index=index) from e

    logger.debug(
        "Rendered %d lines, %d markers for %s (%s)",
        len(lines),
        len(markers),
        element_type,
        convention or "anonymous",
    )
    return RenderedAnnotation(lines=lines, markers=markers, convention=convention)


def fill_template(
    template: str, values: Optional[Sequence[str]] = None
) -> Tuple[str, List[int]]:
    """Substitute ``%s`` slots and strip jump markers.

    With ``values=None`` the template is literal: only jump markers are
    processed.

    Returns:
        Tuple of (text, marker columns)

    Raises:
        ValueError: If there are more ``%s`` slots than values
    """
    parts: List[str] = []
    columns: List[int] = []
    width = 0
    last = 0
    slot = 0

    for match in _TOKEN_RE.finditer(template):
        token = match.group(0)
        piece = template[last:match.start()]
        if token == JUMP_MARKER:
            columns.append(width + len(piece))
        elif values is None:
            piece += token
        elif token == "%%":
            piece += "%"
        else:
            if slot >= len(values):
                raise ValueError(
                    f"template {template!r} has more %s slots than values ({len(values)})"
                )
            piece += values[slot]
            slot += 1
        parts.append(piece)
        width += len(piece)
        last = match.end()

    parts.append(template[last:])
    return "".join(parts), columns


def _firings(rule: AnnotationLine, found: FoundNodes) -> List[Tuple[str, ...]]:
    """Value tuples the rule renders with, one per emitted line"""
    if rule.selector is None:
        if rule.options.no_results and not found.is_empty():
            return []
        return [()]

    matches = _match_selector(rule, found)
    if rule.options.no_results:
        return [] if matches else [()]
    return matches


def _match_selector(rule: AnnotationLine, found: FoundNodes) -> List[Tuple[str, ...]]:
    if isinstance(rule.selector, str):
        return [(value,) for value in found.get(rule.selector)]

    # Composite: every kind must sit together inside the required sub-node
    required = rule.options.required
    if not required:
        return []
    kinds = rule.selector
    return [
        tuple(group[kind] for kind in kinds)
        for group in found.get_groups(required)
        if all(kind in group for kind in kinds)
    ]
