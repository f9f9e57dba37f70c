"""
AI/agent context export.
"""

from hexgraph.ai.context import (
    SCHEMA_VERSION,
    AIContext,
    ComponentInfo,
    ConstraintSet,
    ContextMetadata,
    Priority,
    RelationshipInfo,
    Suggestion,
    SuggestionType,
)
from hexgraph.ai.context_builder import ContextBuilder, build_context
from hexgraph.ai.agent_pack import AgentPack, DocBundle, DocEntry, GuidelinesSnapshot, load_docs

__all__ = [
    "SCHEMA_VERSION",
    "AIContext",
    "ComponentInfo",
    "ConstraintSet",
    "ContextMetadata",
    "Priority",
    "RelationshipInfo",
    "Suggestion",
    "SuggestionType",
    "ContextBuilder",
    "build_context",
    "AgentPack",
    "DocBundle",
    "DocEntry",
    "GuidelinesSnapshot",
    "load_docs",
]
