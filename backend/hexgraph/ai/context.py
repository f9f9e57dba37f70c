# hexgraph/ai/context.py
"""
AI Context Models

Machine-readable description of the architecture for AI assistants and
agents: components, relationships, the rules they must follow, and
improvement suggestions.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_VERSION = "1.0.0"


class SuggestionType(str, Enum):
    MISSING_IMPLEMENTATION = "MissingImplementation"
    ARCHITECTURAL_VIOLATION = "ArchitecturalViolation"
    IMPROVEMENT = "Improvement"
    BEST_PRACTICE = "BestPractice"
    POTENTIAL_ISSUE = "PotentialIssue"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ComponentInfo(BaseModel):
    id: str
    type_name: str
    layer: str
    role: str
    module_path: str
    purpose: Optional[str] = None
    dependencies: List[str] = []  # target ids of outgoing edges


class RelationshipInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    relationship_type: str
    is_valid: bool = True
    validation_message: Optional[str] = None


class DependencyRuleInfo(BaseModel):
    from_layer: str
    to_layer: str
    allowed: bool
    reason: str


class LayerBoundaryInfo(BaseModel):
    layer: str
    can_depend_on: List[str] = []
    dependents_allowed: List[str] = []
    purpose: str = ""


class NamingConventionInfo(BaseModel):
    applies_to: str
    pattern: str
    example: str


class ConstraintSet(BaseModel):
    dependency_rules: List[DependencyRuleInfo] = []
    layer_boundaries: List[LayerBoundaryInfo] = []
    naming_conventions: List[NamingConventionInfo] = []
    required_patterns: List[str] = []


class Suggestion(BaseModel):
    suggestion_type: SuggestionType
    component: Optional[str] = None
    description: str
    priority: Priority
    code_example: Optional[str] = None


class ContextMetadata(BaseModel):
    generated_at: str
    hexgraph_version: str
    total_components: int
    total_relationships: int
    schema_version: str = SCHEMA_VERSION


class AIContext(BaseModel):
    architecture: str = "hexagonal"
    version: str
    components: List[ComponentInfo] = []
    relationships: List[RelationshipInfo] = []
    constraints: ConstraintSet = ConstraintSet()
    suggestions: List[Suggestion] = []
    metadata: ContextMetadata

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        from hexgraph.errors import ContextSerializationError

        try:
            return self.model_dump_json(indent=indent, by_alias=True)
        except ValueError as e:
            raise ContextSerializationError(f"AI context serialization failed: {e}") from e
