"""EmmyLua annotations for Lua"""

from annogen.models.nodes import ValueKind as i

ANNOTATION = [
    (None, "---$1", {"type": ["class", "func"]}),
    (None, "---@module $1", {"no_results": True, "type": ["file"]}),
    (i.Tparam, "---@generic %s $1", {"type": ["func"]}),
    (i.Parameter, "---@param %s $1", {"type": ["func"]}),
    (i.Vararg, "---@vararg $1", {"type": ["func"]}),
    (i.Return, "---@return $1", {"type": ["func"]}),
    (i.ClassName, "---@class %s", {"type": ["class"]}),
    (i.ClassAttribute, "---@field %s $1", {"type": ["class"]}),
    (i.Type, "---@type $1", {"type": ["type"]}),
]
