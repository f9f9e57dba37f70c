"""
Opt-in structural validation of architecture graphs.
"""

from hexgraph.validation.graph_validator import (
    GraphValidationResult,
    GraphValidator,
    ValidationIssue,
    ValidationSeverity,
    validate_graph,
)

__all__ = [
    "GraphValidationResult",
    "GraphValidator",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_graph",
]
