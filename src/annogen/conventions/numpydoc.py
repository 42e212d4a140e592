"""numpydoc style Python docstrings"""

from annogen.models.nodes import ValueKind as i

ANNOTATION = [
    (None, '"""$1', {"type": ["class", "func", "file"]}),
    (
        [i.Parameter, i.Type],
        "%s : %s",
        {
            "required": "typed_parameters",
            "type": ["func"],
            "before_first_item": ["", "Parameters", "----------"],
            "after_each": "    $1",
        },
    ),
    (
        i.Parameter,
        "%s : $1",
        {
            "type": ["func"],
            "before_first_item": ["", "Parameters", "----------"],
            "after_each": "    $1",
        },
    ),
    (
        i.ClassAttribute,
        "%s : $1",
        {
            "type": ["class"],
            "before_first_item": ["", "Attributes", "----------"],
            "after_each": "    $1",
        },
    ),
    (
        i.ReturnTypeHint,
        "%s",
        {
            "type": ["func"],
            "before_first_item": ["", "Returns", "-------"],
            "after_each": "    $1",
        },
    ),
    (
        i.HasReturn,
        "$1",
        {
            "type": ["func"],
            "before_first_item": ["", "Returns", "-------"],
            "after_each": "    $1",
        },
    ),
    (
        i.Throw,
        "%s",
        {
            "type": ["func"],
            "before_first_item": ["", "Raises", "------"],
            "after_each": "    $1",
        },
    ),
    (None, '"""', {"type": ["class", "func", "file"]}),
]
