"""Type descriptors for decode targets that a plain class cannot express."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional

Kind = Literal['type', 'list', 'map', 'optional']


@dataclass(frozen=True, slots=True)
class TypeRef:
    """An inspectable description of a (possibly parameterized) target type.

    `args` may hold classes, typing expressions or other `TypeRef`s:

        TypeRef.list_of(Event)                  # list[Event]
        TypeRef.map_of(TypeRef.list_of(Event))  # dict[str, list[Event]]
        TypeRef(tuple[int, str])                # any typing expression
    """

    kind: Kind
    args: tuple[Any, ...]

    def __init__(self, tp: Any, *args: Any, kind: Kind = 'type') -> None:
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'args', (tp, *args))

    @classmethod
    def list_of(cls, item: Any) -> TypeRef:
        return cls(item, kind='list')

    @classmethod
    def map_of(cls, value: Any, key: Any = str) -> TypeRef:
        return cls(key, value, kind='map')

    @classmethod
    def optional(cls, item: Any) -> TypeRef:
        return cls(item, kind='optional')

    @property
    def type(self) -> Any:
        """The typing expression this descriptor stands for."""
        args = tuple(resolve(arg) for arg in self.args)
        if self.kind == 'list':
            return list[args[0]]  # type: ignore[valid-type]
        if self.kind == 'map':
            return dict[args[0], args[1]]  # type: ignore[valid-type]
        if self.kind == 'optional':
            return Optional[args[0]]
        return args[0]


def resolve(target: Any) -> Any:
    """Return the typing expression for a class or `TypeRef`."""
    return target.type if isinstance(target, TypeRef) else target
