from enum import Enum


class Relationship(Enum):
    """Semantics of a directed edge, source -> target."""
    IMPLEMENTS = "Implements"
    DEPENDS = "Depends"
    TRANSFORMS = "Transforms"
    AGGREGATES = "Aggregates"
    INVOKES = "Invokes"
    PRODUCES = "Produces"
    CONSUMES = "Consumes"
    VALIDATES = "Validates"
    CONFIGURES = "Configures"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value
