import logging
from datetime import datetime, timezone
from typing import List

from hexgraph.ai.context import (
    AIContext,
    ComponentInfo,
    ConstraintSet,
    ContextMetadata,
    DependencyRuleInfo,
    LayerBoundaryInfo,
    NamingConventionInfo,
    Priority,
    RelationshipInfo,
    Suggestion,
    SuggestionType,
)
from hexgraph.graph.edge import Edge
from hexgraph.graph.graph import Graph
from hexgraph.graph.layer import Layer
from hexgraph.rules import (
    DEPENDENCY_RULES,
    LAYER_BOUNDARIES,
    NAMING_CONVENTIONS,
    REQUIRED_PATTERNS,
    is_allowed_dependency,
)
from hexgraph.validation.graph_validator import GraphValidator

logger = logging.getLogger(__name__)

# Validator issue code → (suggestion type, priority)
ISSUE_SUGGESTIONS = {
    "LAYER_VIOLATION": (SuggestionType.ARCHITECTURAL_VIOLATION, Priority.HIGH),
    "UNIMPLEMENTED_PORT": (SuggestionType.MISSING_IMPLEMENTATION, Priority.MEDIUM),
    "CIRCULAR_DEPENDENCY": (SuggestionType.POTENTIAL_ISSUE, Priority.HIGH),
    "GOD_COMPONENT": (SuggestionType.IMPROVEMENT, Priority.LOW),
}


class ContextBuilder:
    """
    Builds an AIContext from a graph.

    Never fails on graph content: dangling edges and rule violations are
    reported inside the context, not raised.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def build(self) -> AIContext:
        from hexgraph import __version__

        components = self._build_components()
        relationships = self._build_relationships()
        context = AIContext(
            version=__version__,
            components=components,
            relationships=relationships,
            constraints=self._build_constraints(),
            suggestions=self._generate_suggestions(components),
            metadata=ContextMetadata(
                generated_at=datetime.now(timezone.utc).isoformat(),
                hexgraph_version=__version__,
                total_components=self.graph.node_count(),
                total_relationships=self.graph.edge_count(),
            ),
        )
        logger.debug(
            "Built AI context: %d components, %d relationships, %d suggestions",
            len(components), len(relationships), len(context.suggestions),
        )
        return context

    # -------------------------
    # Components & relationships
    # -------------------------

    def _build_components(self) -> List[ComponentInfo]:
        return [
            ComponentInfo(
                id=str(node.id),
                type_name=node.type_name,
                layer=str(node.layer),
                role=str(node.role),
                module_path=node.module_path,
                purpose=node.get_metadata("purpose"),
                dependencies=[str(e.target) for e in self.graph.edges_from(node.id)],
            )
            for node in sorted(self.graph.nodes(), key=lambda n: n.id)
        ]

    def _build_relationships(self) -> List[RelationshipInfo]:
        relationships = []
        for edge in self.graph.edges():
            message = self._validate_relationship(edge)
            relationships.append(RelationshipInfo(
                from_=str(edge.source),
                to=str(edge.target),
                relationship_type=str(edge.relationship),
                is_valid=message is None,
                validation_message=message,
            ))
        return relationships

    def _validate_relationship(self, edge: Edge):
        source = self.graph.get_node(edge.source)
        target = self.graph.get_node(edge.target)
        if source is None or target is None:
            return "References a component that is not registered"
        if not is_allowed_dependency(source.layer, target.layer):
            return "Violates layer dependency rules"
        return None

    # -------------------------
    # Constraints
    # -------------------------

    def _build_constraints(self) -> ConstraintSet:
        return ConstraintSet(
            dependency_rules=[
                DependencyRuleInfo(
                    from_layer=str(r.from_layer), to_layer=str(r.to_layer), allowed=r.allowed, reason=r.reason
                )
                for r in DEPENDENCY_RULES
            ],
            layer_boundaries=[
                LayerBoundaryInfo(
                    layer=str(b.layer),
                    can_depend_on=[str(l) for l in b.can_depend_on],
                    dependents_allowed=[str(l) for l in b.dependents_allowed],
                    purpose=b.purpose,
                )
                for b in LAYER_BOUNDARIES
            ],
            naming_conventions=[
                NamingConventionInfo(applies_to=n.applies_to, pattern=n.pattern, example=n.example)
                for n in NAMING_CONVENTIONS
            ],
            required_patterns=list(REQUIRED_PATTERNS),
        )

    # -------------------------
    # Suggestions
    # -------------------------

    def _generate_suggestions(self, components: List[ComponentInfo]) -> List[Suggestion]:
        suggestions: List[Suggestion] = []

        ports = [c for c in components if c.layer == str(Layer.PORT)]
        adapters = [c for c in components if c.layer == str(Layer.ADAPTER)]
        if len(ports) > len(adapters):
            suggestions.append(Suggestion(
                suggestion_type=SuggestionType.MISSING_IMPLEMENTATION,
                description="More ports than adapters - some ports may need implementations",
                priority=Priority.MEDIUM,
            ))

        result = GraphValidator(self.graph).validate()
        for issue in result.issues:
            mapped = ISSUE_SUGGESTIONS.get(issue.code)
            if mapped is None:
                continue
            suggestion_type, priority = mapped
            suggestions.append(Suggestion(
                suggestion_type=suggestion_type,
                component=issue.node_id,
                description=f"{issue.message}. {issue.suggestion}" if issue.suggestion else issue.message,
                priority=priority,
            ))
        return suggestions


def build_context(graph: Graph) -> AIContext:
    return ContextBuilder(graph).build()
