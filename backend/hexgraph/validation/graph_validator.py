"""
Graph Validator - optional structural checks over a built Graph.

Catches issues like:
- Edges pointing at ids that are not nodes
- Self loops and duplicate edges
- Layer dependency violations (e.g. Domain -> Adapter)
- Ports without an implementing adapter
- Circular dependencies
- Orphaned and god components

Graph construction never calls this; it is an opt-in report.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from hexgraph.graph.graph import Graph
from hexgraph.graph.layer import Layer
from hexgraph.graph.node_id import NodeId
from hexgraph.graph.relationship import Relationship
from hexgraph.rules import is_allowed_dependency

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    ERROR = "error"      # Architecture rule broken
    WARNING = "warning"  # Structurally suspicious
    INFO = "info"        # Worth a look


@dataclass
class ValidationIssue:
    """A single validation issue found in the graph"""
    severity: ValidationSeverity
    code: str
    message: str
    node_id: Optional[str] = None
    edge_info: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "node_id": self.node_id,
            "edge_info": self.edge_info,
            "suggestion": self.suggestion,
        }


@dataclass
class GraphValidationResult:
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.INFO)

    def issues_with_code(self, code: str) -> List[ValidationIssue]:
        return [i for i in self.issues if i.code == code]

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        status = "Valid" if self.is_valid else "Invalid"
        return (
            f"{status} | "
            f"Errors: {self.error_count}, Warnings: {self.warning_count}, Info: {self.info_count}"
        )


class GraphValidator:
    """
    Usage:
        result = GraphValidator(graph).validate()
        for issue in result.issues:
            print(f"[{issue.severity.value}] {issue.message}")
    """

    GOD_COMPONENT_THRESHOLD = 10

    def __init__(self, graph: Graph, strict_mode: bool = False):
        self.graph = graph
        self.strict_mode = strict_mode

    def _label(self, node_id: NodeId) -> str:
        node = self.graph.get_node(node_id)
        return node.type_name if node else str(node_id)

    def _is_adapter(self, node_id: NodeId) -> bool:
        node = self.graph.get_node(node_id)
        return node is not None and node.layer == Layer.ADAPTER

    def validate(self) -> GraphValidationResult:
        issues: List[ValidationIssue] = []
        issues.extend(self._check_dangling_edges())
        issues.extend(self._check_self_loops())
        issues.extend(self._check_duplicate_edges())
        issues.extend(self._check_layer_dependencies())
        issues.extend(self._check_port_implementations())
        issues.extend(self._check_circular_dependencies())
        issues.extend(self._check_orphaned_components())
        issues.extend(self._check_god_components())

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)
        is_valid = not has_errors
        if self.strict_mode:
            is_valid = not has_errors and not has_warnings

        result = GraphValidationResult(is_valid=is_valid, issues=issues, stats=self._calculate_stats())
        logger.debug("Graph validation: %s", result.get_summary())
        return result

    def _check_dangling_edges(self) -> List[ValidationIssue]:
        issues = []
        for edge in self.graph.edges():
            for end, node_id in (("source", edge.source), ("target", edge.target)):
                if not self.graph.has_node(node_id):
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        code=f"MISSING_{end.upper()}_NODE",
                        message=f"Edge references non-existent {end} node {node_id}",
                        edge_info=str(edge),
                        suggestion="Register the component or remove the declared dependency",
                    ))
        return issues

    def _check_self_loops(self) -> List[ValidationIssue]:
        issues = []
        for edge in self.graph.edges():
            if edge.source == edge.target:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="SELF_LOOP",
                    message=f"'{self._label(edge.source)}' depends on itself",
                    node_id=str(edge.source),
                    edge_info=str(edge),
                    suggestion="Remove self-referencing edge unless intentional",
                ))
        return issues

    def _check_duplicate_edges(self) -> List[ValidationIssue]:
        issues = []
        edge_counts: Dict[Tuple[NodeId, NodeId, Relationship], int] = defaultdict(int)
        for edge in self.graph.edges():
            edge_counts[(edge.source, edge.target, edge.relationship)] += 1
        for (source, target, relationship), count in edge_counts.items():
            if count > 1:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.INFO,
                    code="DUPLICATE_EDGE",
                    message=(
                        f"Edge '{self._label(source)}' -[{relationship}]-> "
                        f"'{self._label(target)}' appears {count} times"
                    ),
                    edge_info=f"{source} -> {target}",
                    suggestion="Declare each dependency once",
                ))
        return issues

    def _check_layer_dependencies(self) -> List[ValidationIssue]:
        issues = []
        for edge in self.graph.edges():
            source = self.graph.get_node(edge.source)
            target = self.graph.get_node(edge.target)
            if source is None or target is None:
                continue
            if not is_allowed_dependency(source.layer, target.layer):
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="LAYER_VIOLATION",
                    message=(
                        f"{source.layer} layer cannot depend on {target.layer} layer "
                        f"({source.type_name} -> {target.type_name})"
                    ),
                    node_id=str(source.id),
                    edge_info=str(edge),
                    suggestion="Depend on a port instead and let an adapter implement it",
                ))
        return issues

    def _check_port_implementations(self) -> List[ValidationIssue]:
        issues = []
        for port in self.graph.nodes_by_layer(Layer.PORT):
            implemented = any(
                e.relationship == Relationship.IMPLEMENTS or self._is_adapter(e.source)
                for e in self.graph.edges_to(port.id)
            )
            if not implemented:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="UNIMPLEMENTED_PORT",
                    message=f"Port '{port.type_name}' has no implementing adapter",
                    node_id=str(port.id),
                    suggestion="Add an adapter that implements or depends on this port",
                ))
        return issues

    def _check_circular_dependencies(self) -> List[ValidationIssue]:
        issues = []
        for cycle in self.graph.analysis().detect_cycles()[:3]:
            names = [self._label(node_id) for node_id in cycle]
            cycle_str = " -> ".join(names + names[:1])
            issues.append(ValidationIssue(
                severity=ValidationSeverity.WARNING,
                code="CIRCULAR_DEPENDENCY",
                message=f"Circular dependency detected: {cycle_str}",
                suggestion="Break the cycle with a port or a domain event",
            ))
        return issues

    def _check_orphaned_components(self) -> List[ValidationIssue]:
        issues = []
        connected = set()
        for edge in self.graph.edges():
            connected.add(edge.source)
            connected.add(edge.target)
        if self.graph.node_count() < 2:
            return issues
        for node in sorted(self.graph.nodes(), key=lambda n: n.id):
            if node.id not in connected:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.INFO,
                    code="ORPHANED_COMPONENT",
                    message=f"'{node.type_name}' ({node.layer}/{node.role}) has no connections",
                    node_id=str(node.id),
                    suggestion="Declare its dependencies or remove it if unused",
                ))
        return issues

    def _check_god_components(self) -> List[ValidationIssue]:
        issues = []
        degree: Dict[NodeId, int] = defaultdict(int)
        for edge in self.graph.edges():
            degree[edge.source] += 1
            degree[edge.target] += 1
        for node in sorted(self.graph.nodes(), key=lambda n: n.id):
            if degree[node.id] > self.GOD_COMPONENT_THRESHOLD:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="GOD_COMPONENT",
                    message=f"'{node.type_name}' has {degree[node.id]} connections",
                    node_id=str(node.id),
                    suggestion="Split responsibilities across smaller components",
                ))
        return issues

    def _calculate_stats(self) -> Dict[str, int]:
        stats = {
            "nodes": self.graph.node_count(),
            "edges": self.graph.edge_count(),
            "dangling_edges": sum(
                1 for e in self.graph.edges()
                if not (self.graph.has_node(e.source) and self.graph.has_node(e.target))
            ),
        }
        for layer in Layer:
            stats[layer.value.lower()] = len(self.graph.nodes_by_layer(layer))
        return stats


def validate_graph(graph: Graph, strict: bool = False) -> GraphValidationResult:
    """Convenience function to validate a graph"""
    return GraphValidator(graph, strict_mode=strict).validate()
