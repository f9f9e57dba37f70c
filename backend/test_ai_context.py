"""AI context and agent pack export"""

import json

import pytest

from conftest import make_node
from hexgraph import __version__
from hexgraph.ai import AgentPack, ContextBuilder, Priority, SuggestionType, load_docs
from hexgraph.errors import ContextSerializationError
from hexgraph.graph import Edge, GraphBuilder, Layer, NodeId, Relationship, Role


def test_context_for_product_graph(product_graph):
    context = ContextBuilder(product_graph).build()

    assert context.architecture == "hexagonal"
    assert context.version == __version__
    assert context.metadata.total_components == 3
    assert context.metadata.total_relationships == 2
    assert context.metadata.schema_version == "1.0.0"
    assert {c.type_name for c in context.components} == {
        "Product", "ProductRepository", "PostgresProductRepository",
    }
    assert all(r.is_valid for r in context.relationships)


def test_component_dependencies_are_edge_targets(product_graph, product_nodes):
    context = ContextBuilder(product_graph).build()
    adapter = next(c for c in context.components if c.type_name == "PostgresProductRepository")
    port_id = str(product_nodes["ProductRepository"].id)
    assert adapter.dependencies == [port_id, port_id]
    assert adapter.layer == "Adapter"
    assert adapter.role == "Adapter"


def test_layer_violation_marks_relationship_invalid():
    entity = make_node("Product", Layer.DOMAIN, Role.ENTITY)
    adapter = make_node("PostgresProductRepository", Layer.ADAPTER, Role.ADAPTER)
    graph = (
        GraphBuilder()
        .add_nodes([entity, adapter])
        .add_edge(Edge(entity.id, adapter.id, Relationship.DEPENDS))
        .build()
    )

    context = ContextBuilder(graph).build()

    assert context.relationships[0].is_valid is False
    assert context.relationships[0].validation_message == "Violates layer dependency rules"
    kinds = {s.suggestion_type for s in context.suggestions}
    assert SuggestionType.ARCHITECTURAL_VIOLATION in kinds


def test_dangling_edge_does_not_break_context():
    node = make_node("Checkout", Layer.APPLICATION, Role.USE_CASE)
    graph = GraphBuilder().add_node(node).add_edge(
        Edge(node.id, NodeId.from_name("shop.Payments"), Relationship.DEPENDS)
    ).build()

    context = ContextBuilder(graph).build()

    assert len(context.relationships) == 1
    assert context.relationships[0].is_valid is False


def test_more_ports_than_adapters_suggestion():
    graph = (
        GraphBuilder()
        .add_node(make_node("OrderRepository", Layer.PORT, Role.REPOSITORY))
        .add_node(make_node("PaymentGateway", Layer.PORT, Role.OUTPUT_PORT))
        .build()
    )
    suggestions = ContextBuilder(graph).build().suggestions

    general = [s for s in suggestions if s.component is None]
    assert general[0].suggestion_type == SuggestionType.MISSING_IMPLEMENTATION
    assert general[0].priority == Priority.MEDIUM
    # One per unimplemented port as well
    assert len([s for s in suggestions if s.component is not None]) == 2


def test_constraints_carry_static_rules(product_graph):
    constraints = ContextBuilder(product_graph).build().constraints
    reasons = [r.reason for r in constraints.dependency_rules]
    assert "Domain must not depend on adapters" in reasons
    assert constraints.layer_boundaries[0].layer == "Domain"
    assert constraints.required_patterns


def test_context_json_uses_from_key(product_graph):
    data = json.loads(ContextBuilder(product_graph).build().to_json())
    relationship = data["relationships"][0]
    assert "from" in relationship and "from_" not in relationship
    assert data["metadata"]["hexgraph_version"] == __version__


# -------------------------
# Agent pack
# -------------------------

def test_agent_pack_bundles_docs(tmp_path, product_graph):
    readme = tmp_path / "README.md"
    readme.write_text("\n# Shop\n\nThe shop service.\n", encoding="utf-8")

    pack = AgentPack.from_graph(
        product_graph,
        doc_paths=[readme, tmp_path / "missing.md"],
        package_name="shop",
        package_version="1.2.3",
    )
    data = json.loads(pack.to_json())

    assert data["schema_version"] == "1.0.0"
    assert data["package_name"] == "shop"
    assert data["package_version"] == "1.2.3"
    assert len(data["graph"]["nodes"]) == 3
    assert data["ai_context"]["metadata"]["total_components"] == 3
    entries = data["docs"]["entries"]
    assert len(entries) == 1
    assert entries[0]["title"] == "# Shop"
    assert entries[0]["bytes"] == len(readme.read_bytes())


def test_agent_pack_defaults(product_graph):
    pack = AgentPack.from_graph(product_graph, doc_paths=[])
    assert pack.package_name == "hexgraph"
    assert pack.package_version == __version__
    assert pack.docs.entries == []
    assert pack.guidelines.testing_mandate is True


def test_empty_file_title_falls_back_to_name(tmp_path):
    blank = tmp_path / "NOTES.md"
    blank.write_text("\n\n", encoding="utf-8")
    assert load_docs([blank]).entries[0].title == "NOTES.md"


def test_pack_serialization_failure_is_wrapped(product_graph, monkeypatch):
    pack = AgentPack.from_graph(product_graph, doc_paths=[])

    def broken(*args, **kwargs):
        raise ValueError("boom")

    monkeypatch.setattr(AgentPack, "model_dump_json", broken)
    with pytest.raises(ContextSerializationError) as excinfo:
        pack.to_json()
    assert excinfo.value.code == "E_AI_PACK_SERIALIZE"


def test_long_dependency_chain_builds_context():
    nodes = [make_node(f"C{i}", Layer.APPLICATION, Role.USE_CASE) for i in range(1500)]
    builder = GraphBuilder().add_nodes(nodes)
    for source, target in zip(nodes, nodes[1:]):
        builder.add_edge(Edge(source.id, target.id, Relationship.DEPENDS))

    context = ContextBuilder(builder.build()).build()
    assert context.metadata.total_components == 1500
    assert context.metadata.total_relationships == 1499
    assert all(r.is_valid for r in context.relationships)
