"""Google style Python docstrings"""

from annogen.models.nodes import ValueKind as i

ANNOTATION = [
    (None, '"""$1', {"type": ["class", "func", "file"]}),
    (
        [i.Parameter, i.Type],
        "    %s (%s): $1",
        {"required": "typed_parameters", "type": ["func"], "before_first_item": ["", "Args:"]},
    ),
    (i.Parameter, "    %s ($1): $1", {"type": ["func"], "before_first_item": ["", "Args:"]}),
    (i.ArbitraryArgs, "    *%s: $1", {"type": ["func"]}),
    (i.Kwargs, "    **%s: $1", {"type": ["func"]}),
    (i.ClassAttribute, "    %s: $1", {"type": ["class"], "before_first_item": ["", "Attributes:"]}),
    (i.HasReturn, "    $1", {"type": ["func"], "before_first_item": ["", "Returns:"]}),
    (i.Throw, "    %s: $1", {"type": ["func"], "before_first_item": ["", "Raises:"]}),
    (None, '"""', {"type": ["class", "func", "file"]}),
]
