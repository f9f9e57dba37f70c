from dataclasses import dataclass
from functools import total_ordering

_MASK_64 = (1 << 64) - 1


@total_ordering
@dataclass(frozen=True)
class NodeId:
    """
    Stable identifier of a component in the architecture graph.

    Derived from the component's fully-qualified name with a 64-bit djb2
    hash, so the same name always maps to the same id.
    """
    value: int

    @classmethod
    def from_name(cls, name: str) -> "NodeId":
        return cls(_hash_name(name))

    @classmethod
    def of(cls, component: type) -> "NodeId":
        return cls.from_name(qualified_name(component))

    def as_int(self) -> int:
        return self.value

    def __lt__(self, other):
        if not isinstance(other, NodeId):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return f"NodeId({self.value})"


def qualified_name(component: type) -> str:
    """module.QualName of a class, the default type name of a component."""
    return f"{component.__module__}.{component.__qualname__}"


def _hash_name(name: str) -> int:
    h = 5381
    for byte in name.encode("utf-8"):
        h = (h * 33 + byte) & _MASK_64
    return h
