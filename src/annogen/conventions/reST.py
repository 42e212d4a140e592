"""reStructuredText field lists (Sphinx)"""

from annogen.models.nodes import ValueKind as i

ANNOTATION = [
    (None, '"""$1', {"type": ["class", "func", "file"]}),
    (None, "", {"type": ["func"]}),
    ([i.Type, i.Parameter], ":param %s %s: $1", {"required": "typed_parameters", "type": ["func"]}),
    (i.Parameter, ":param %s: $1", {"type": ["func"]}),
    (i.Parameter, ":type %s: $1", {"type": ["func"]}),
    (i.HasReturn, ":return: $1", {"type": ["func"]}),
    (i.HasReturn, ":rtype: $1", {"type": ["func"]}),
    (i.Throw, ":raises %s: $1", {"type": ["func"]}),
    (None, '"""', {"type": ["class", "func", "file"]}),
]
