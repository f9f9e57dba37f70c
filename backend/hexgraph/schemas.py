from pydantic import BaseModel
from typing import Optional, Dict, Any, List


class ErrorResponse(BaseModel):
    status: str = "error"
    code: str
    message: str
    next_steps: List[str] = []


class NodeResponse(BaseModel):
    id: str
    type_name: str
    layer: str
    role: str
    module_path: str
    metadata: Dict[str, str] = {}


class EdgeResponse(BaseModel):
    source: str
    target: str
    relationship: str


class GraphSummaryResponse(BaseModel):
    status: str = "success"
    description: str
    version: int
    created_at: int
    node_count: int
    edge_count: int
    layer_count: int
    component_count: int
    layers: Dict[str, int]


class NodeListResponse(BaseModel):
    status: str = "success"
    count: int
    nodes: List[NodeResponse]


class EdgeListResponse(BaseModel):
    status: str = "success"
    count: int
    edges: List[EdgeResponse]


class ExportResponse(BaseModel):
    status: str = "success"
    format: str
    format_name: str
    extension: str
    source: str


class CouplingResponse(BaseModel):
    node_id: str
    afferent: int
    efferent: int
    instability: float


class AnalysisResponse(BaseModel):
    status: str = "success"
    cycles: List[List[str]]
    leaf_nodes: List[str]
    root_nodes: List[str]
    patterns: List[Dict[str, Any]]
    coupling: List[CouplingResponse]


class ValidationResponse(BaseModel):
    status: str = "success"
    summary: str
    report: Dict[str, Any]


class RefreshResponse(BaseModel):
    status: str = "success"
    node_count: int
    edge_count: int
    refreshed_at: Optional[int] = None
