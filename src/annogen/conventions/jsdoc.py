"""JSDoc block comments"""

from annogen.models.nodes import ValueKind as i

ANNOTATION = [
    (None, "/**", {"type": ["class", "func", "file"]}),
    (None, " * $1", {"type": ["class", "func"]}),
    (None, " * @file $1", {"type": ["file"]}),
    (i.ClassName, " * @class %s", {"type": ["class"]}),
    ([i.Type, i.Parameter], " * @param {%s} %s $1", {"required": "typed_parameters", "type": ["func"]}),
    (i.Parameter, " * @param {$1} %s $1", {"type": ["func"]}),
    (i.HasReturn, " * @returns {$1} $1", {"type": ["func"]}),
    (i.Throw, " * @throws {%s} $1", {"type": ["func"]}),
    (None, " */", {"type": ["class", "func", "file"]}),
]
