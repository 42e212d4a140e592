"""Found node model - code structure values supplied by node discovery"""

from enum import Enum
from typing import Any, Dict, List, Mapping
from pydantic import BaseModel, Field, field_validator


class ValueKind(str, Enum):
    """Value-kinds the built-in conventions select on.

    Member names match their values so members and plain strings can be
    mixed freely as dictionary keys.
    """
    Tparam = "Tparam"
    Parameter = "Parameter"
    Return = "Return"
    ReturnTypeHint = "ReturnTypeHint"
    ReturnAnonym = "ReturnAnonym"
    ClassName = "ClassName"
    Throw = "Throw"
    Vararg = "Vararg"
    Type = "Type"
    ClassAttribute = "ClassAttribute"
    HasParameter = "HasParameter"
    HasReturn = "HasReturn"
    HasThrow = "HasThrow"
    ArbitraryArgs = "ArbitraryArgs"
    Kwargs = "Kwargs"


def kind_name(kind: Any) -> Any:
    """Plain string name of a value-kind (other values pass through)"""
    if isinstance(kind, Enum):
        return kind.value
    return kind


class FoundNodes(BaseModel):
    """Values discovered for one code element, grouped by value-kind.

    ``values`` maps a value-kind to its display strings in discovery order.
    ``groups`` maps a composite sub-node name (e.g. ``typed_parameters``) to
    the co-located value-kind -> value mappings found inside it.
    """

    values: Dict[str, List[str]] = Field(default_factory=dict)
    groups: Dict[str, List[Dict[str, str]]] = Field(default_factory=dict)

    @field_validator("values", "groups", mode="before")
    @classmethod
    def normalize_keys(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {kind_name(key): items for key, items in v.items()}
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FoundNodes":
        """Build from the plain nested mapping produced by node discovery.

        Lists of strings become values; lists of mappings become composite
        groups, and a single mapping is one group. A group entry holding a
        list keeps its first element.
        """
        values: Dict[str, List[str]] = {}
        groups: Dict[str, List[Dict[str, str]]] = {}
        for key, items in (data or {}).items():
            name = kind_name(key)
            if items is None:
                continue
            if isinstance(items, (str, int, float)):
                values[name] = [str(items)]
                continue
            if isinstance(items, Mapping):
                groups[name] = [_flatten_group(items)]
                continue
            items = list(items)
            if items and all(isinstance(item, Mapping) for item in items):
                groups[name] = [_flatten_group(item) for item in items]
            else:
                values[name] = [str(item) for item in items]
        return cls(values=values, groups=groups)

    def get(self, kind: Any) -> List[str]:
        """Discovered values for a value-kind (empty if unknown)"""
        return self.values.get(kind_name(kind), [])

    def get_groups(self, name: Any) -> List[Dict[str, str]]:
        """Composite groups found under a sub-node name"""
        return self.groups.get(kind_name(name), [])

    def is_empty(self) -> bool:
        """Whether nothing at all was discovered"""
        return not any(self.values.values()) and not any(self.groups.values())


def _flatten_group(item: Mapping[Any, Any]) -> Dict[str, str]:
    group: Dict[str, str] = {}
    for key, value in item.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[0]
        group[kind_name(key)] = str(value)
    return group
