import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from hexgraph.ai import AgentPack, ContextBuilder
from hexgraph.api.serializers import serialize_edge, serialize_graph_value, serialize_node
from hexgraph.exporters import ExportGraph, get_exporter
from hexgraph.graph.layer import LAYER_ORDER, Layer
from hexgraph.graph.role import Role
from hexgraph.registry import component_count, current_graph, refresh_graph
from hexgraph.schemas import (
    AnalysisResponse,
    CouplingResponse,
    EdgeListResponse,
    ExportResponse,
    GraphSummaryResponse,
    NodeListResponse,
    RefreshResponse,
    ValidationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/graph", response_model=GraphSummaryResponse)
def graph_summary():
    graph = current_graph()
    metadata = graph.metadata
    return GraphSummaryResponse(
        description=metadata.description,
        version=metadata.version,
        created_at=metadata.created_at,
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        layer_count=graph.layer_count(),
        component_count=component_count(),
        layers={str(layer): len(graph.nodes_by_layer(layer)) for layer in LAYER_ORDER},
    )


@router.get("/graph/nodes", response_model=NodeListResponse)
def list_nodes(
    layer: Optional[str] = Query(None, description="Layer name, e.g. Domain"),
    role: Optional[str] = Query(None, description="Role name, e.g. Repository"),
    name: Optional[str] = Query(None, description="Substring of the type name"),
):
    query = current_graph().query()
    if layer:
        query = query.layer(Layer.parse(layer))
    if role:
        query = query.role(Role.of(role))
    if name:
        query = query.type_name_contains(name)

    nodes = sorted(query.execute(), key=lambda n: n.id)
    return NodeListResponse(count=len(nodes), nodes=[serialize_node(n) for n in nodes])


@router.get("/graph/edges", response_model=EdgeListResponse)
def list_edges():
    edges = current_graph().edges()
    return EdgeListResponse(count=len(edges), edges=[serialize_edge(e) for e in edges])


@router.get("/graph/export/{fmt}", response_model=ExportResponse)
def export_graph(fmt: str):
    exporter = get_exporter(fmt)
    source = ExportGraph(exporter).execute(current_graph())
    return ExportResponse(
        format=fmt,
        format_name=exporter.format_name(),
        extension=exporter.file_extension(),
        source=source,
    )


@router.get("/graph/export/{fmt}/raw", response_class=PlainTextResponse)
def export_graph_raw(fmt: str):
    exporter = get_exporter(fmt)
    return PlainTextResponse(ExportGraph(exporter).execute(current_graph()))


@router.get("/graph/context")
def ai_context():
    return ContextBuilder(current_graph()).build().to_dict()


@router.get("/graph/pack")
def agent_pack():
    pack = AgentPack.from_graph(current_graph())
    return pack.model_dump(mode="json", by_alias=True)


@router.get("/graph/validate", response_model=ValidationResponse)
def validate(strict: bool = False):
    result = current_graph().validator(strict_mode=strict).validate()
    return ValidationResponse(summary=result.get_summary(), report=result.to_dict())


@router.get("/graph/analysis", response_model=AnalysisResponse)
def analysis():
    graph = current_graph()
    analyzer = graph.analysis()
    coupling = []
    for node in sorted(graph.nodes(), key=lambda n: n.id):
        metrics = analyzer.calculate_coupling(node.id)
        coupling.append(CouplingResponse(
            node_id=str(node.id),
            afferent=metrics.afferent,
            efferent=metrics.efferent,
            instability=metrics.instability,
        ))
    return AnalysisResponse(
        cycles=[[str(i) for i in cycle] for cycle in analyzer.detect_cycles()],
        leaf_nodes=sorted(str(n.id) for n in analyzer.find_leaf_nodes()),
        root_nodes=sorted(str(n.id) for n in analyzer.find_root_nodes()),
        patterns=[serialize_graph_value(p) for p in analyzer.identify_patterns()],
        coupling=coupling,
    )


@router.post("/graph/refresh", response_model=RefreshResponse)
def refresh():
    graph = refresh_graph()
    logger.info("Graph refreshed via API: %d nodes", graph.node_count())
    return RefreshResponse(
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        refreshed_at=graph.metadata.created_at,
    )
