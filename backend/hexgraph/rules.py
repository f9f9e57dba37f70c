"""
Static architectural rules for the hexagonal layering.

Shared by the graph validator and the AI context export.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set

from hexgraph.graph.layer import LAYER_ORDER, Layer


@dataclass(frozen=True)
class DependencyRule:
    from_layer: Layer
    to_layer: Layer
    allowed: bool
    reason: str


@dataclass(frozen=True)
class LayerBoundary:
    layer: Layer
    can_depend_on: List[Layer] = field(default_factory=list)
    dependents_allowed: List[Layer] = field(default_factory=list)
    purpose: str = ""


@dataclass(frozen=True)
class NamingConvention:
    applies_to: str
    pattern: str
    example: str


# Layers each layer may depend on. Application and Infrastructure may
# depend on anything; Unknown is never checked.
ALLOWED_DEPENDENCIES: Dict[Layer, Set[Layer]] = {
    Layer.DOMAIN: {Layer.DOMAIN},
    Layer.PORT: {Layer.DOMAIN, Layer.PORT},
    Layer.ADAPTER: {Layer.DOMAIN, Layer.PORT, Layer.ADAPTER},
    Layer.APPLICATION: set(Layer),
    Layer.INFRASTRUCTURE: set(Layer),
}


def is_allowed_dependency(from_layer: Layer, to_layer: Layer) -> bool:
    if Layer.UNKNOWN in (from_layer, to_layer):
        return True
    return to_layer in ALLOWED_DEPENDENCIES.get(from_layer, set())


DEPENDENCY_RULES: List[DependencyRule] = [
    DependencyRule(Layer.DOMAIN, Layer.ADAPTER, False, "Domain must not depend on adapters"),
    DependencyRule(Layer.DOMAIN, Layer.INFRASTRUCTURE, False, "Domain must not depend on infrastructure"),
    DependencyRule(Layer.DOMAIN, Layer.PORT, False, "Domain must not depend on ports"),
    DependencyRule(Layer.PORT, Layer.ADAPTER, False, "Ports define interfaces and must not know their implementations"),
    DependencyRule(Layer.ADAPTER, Layer.PORT, True, "Adapters implement ports"),
    DependencyRule(Layer.ADAPTER, Layer.DOMAIN, True, "Adapters translate to and from domain types"),
    DependencyRule(Layer.APPLICATION, Layer.DOMAIN, True, "Application coordinates domain logic"),
    DependencyRule(Layer.APPLICATION, Layer.PORT, True, "Application drives ports"),
]

_CHECKED_LAYERS = [l for l in LAYER_ORDER if l != Layer.UNKNOWN]


def _boundary(layer: Layer, purpose: str) -> LayerBoundary:
    # Derived from ALLOWED_DEPENDENCIES; same-layer dependencies count
    return LayerBoundary(
        layer,
        can_depend_on=[l for l in _CHECKED_LAYERS if is_allowed_dependency(layer, l)],
        dependents_allowed=[l for l in _CHECKED_LAYERS if is_allowed_dependency(l, layer)],
        purpose=purpose,
    )


LAYER_BOUNDARIES: List[LayerBoundary] = [
    _boundary(Layer.DOMAIN, "Pure business logic, depending on nothing outside the domain"),
    _boundary(Layer.PORT, "Interfaces defining what the application needs"),
    _boundary(Layer.ADAPTER, "Concrete implementations of ports"),
    _boundary(Layer.APPLICATION, "Use cases orchestrating domain, ports and adapters"),
    _boundary(Layer.INFRASTRUCTURE, "Wiring, configuration and runtime concerns"),
]


NAMING_CONVENTIONS: List[NamingConvention] = [
    NamingConvention("Repository ports", "*Repository", "class UserRepository(Repository[User])"),
    NamingConvention("Directives", "*Directive", "class CreateUserDirective"),
    NamingConvention("Queries", "*Query", "class FindUserByEmailQuery"),
    NamingConvention("Adapters", "<Technology><Port>", "class PostgresUserRepository"),
]

REQUIRED_PATTERNS: List[str] = [
    "Dependencies point inward, towards the domain",
    "Every port has at least one adapter",
    "Components declare their layer and role",
]
