"""Graph model, builder and read API"""

import pytest

from conftest import make_node
from hexgraph.errors import GraphValidationError
from hexgraph.graph import (
    Edge,
    Graph,
    GraphBuilder,
    Layer,
    Node,
    NodeId,
    Relationship,
    Role,
)
from hexgraph.graph.metadata import DEFAULT_DESCRIPTION


class Widget:
    pass


# -------------------------
# Identifiers and tags
# -------------------------

def test_node_id_is_deterministic():
    assert NodeId.from_name("shop.Product") == NodeId.from_name("shop.Product")
    assert NodeId.from_name("shop.Product") != NodeId.from_name("shop.Order")
    assert hash(NodeId.from_name("x")) == hash(NodeId.from_name("x"))


def test_node_id_of_class_uses_qualified_name():
    assert NodeId.of(Widget) == NodeId.from_name(f"{__name__}.Widget")


def test_node_id_display_and_order():
    a, b = NodeId(1), NodeId(2)
    assert str(a) == "NodeId(1)"
    assert a < b
    assert sorted([b, a]) == [a, b]
    assert 0 <= NodeId.from_name("anything").as_int() < 2 ** 64


def test_layer_parse_is_lenient():
    assert Layer.parse("domain") == Layer.DOMAIN
    assert Layer.parse("ADAPTER") == Layer.ADAPTER
    assert Layer.parse("nonsense") == Layer.UNKNOWN
    assert str(Layer.PORT) == "Port"


def test_role_is_open_ended():
    custom = Role.of("Saga")
    assert custom == Role("Saga")
    assert custom != Role.AGGREGATE
    assert str(Role.REPOSITORY) == "Repository"


def test_node_metadata_is_read_only():
    node = Node(
        id=NodeId.from_name("shop.Product"),
        layer=Layer.DOMAIN,
        role=Role.ENTITY,
        type_name="Product",
        module_path="shop",
        metadata={"purpose": "catalog item"},
    )
    assert node.get_metadata("purpose") == "catalog item"
    assert node.get_metadata("missing") is None
    with pytest.raises(TypeError):
        node.metadata["purpose"] = "changed"


# -------------------------
# Builder
# -------------------------

def test_duplicate_ids_keep_last_node():
    first = make_node("Product", Layer.DOMAIN, Role.ENTITY)
    second = make_node("Product", Layer.DOMAIN, Role.AGGREGATE)
    graph = GraphBuilder().add_node(first).add_node(second).build()

    assert graph.node_count() == 1
    assert graph.get_node(first.id).role == Role.AGGREGATE


def test_dangling_edge_is_tolerated():
    node = make_node("Product", Layer.DOMAIN, Role.ENTITY)
    ghost = NodeId.from_name("shop.Ghost")
    graph = GraphBuilder().add_node(node).add_edge(Edge(node.id, ghost, Relationship.DEPENDS)).build()

    assert graph.edge_count() == 1
    assert graph.nodes_by_layer(Layer.DOMAIN) == [node]
    assert graph.get_node(ghost) is None


def test_build_validated_reports_missing_ends():
    node = make_node("Product", Layer.DOMAIN, Role.ENTITY)
    ghost = NodeId.from_name("shop.Ghost")
    builder = GraphBuilder().add_node(node).add_edge(Edge(ghost, node.id, Relationship.DEPENDS))
    builder.add_edge(Edge(node.id, ghost, Relationship.DEPENDS))

    codes = [e.code for e in builder.validate()]
    assert codes == ["E_HEX_GRAPH_001", "E_HEX_GRAPH_002"]
    with pytest.raises(GraphValidationError) as excinfo:
        builder.build_validated()
    assert excinfo.value.code == "E_HEX_GRAPH_001"
    # Plain build still succeeds
    assert builder.build().edge_count() == 2


def test_builder_description():
    assert GraphBuilder().build().metadata.description == DEFAULT_DESCRIPTION
    graph = GraphBuilder().with_description("Shop").build()
    assert graph.metadata.description == "Shop"


def test_builder_attributes():
    graph = GraphBuilder().with_attribute("team", "checkout").with_attribute("env", "prod").build()
    assert graph.metadata.get_attribute("team") == "checkout"
    assert graph.metadata.get_attribute("missing") is None
    assert GraphBuilder().build().metadata.attributes == {}
    assert graph.pretty_print().endswith("Attributes:\n  env: prod\n  team: checkout")


def test_graph_builder_shortcut():
    assert isinstance(Graph.builder(), GraphBuilder)
    assert Graph().is_empty()


# -------------------------
# Read API
# -------------------------

def test_product_scenario_counts(product_graph):
    assert product_graph.node_count() == 3
    assert product_graph.edge_count() == 2
    assert len(product_graph.nodes_by_layer(Layer.DOMAIN)) == 1
    assert product_graph.layer_count() == 3


def test_nodes_is_restartable(product_graph):
    nodes = product_graph.nodes()
    assert len(list(nodes)) == 3
    assert len(list(nodes)) == 3


def test_edges_keep_insertion_order(product_graph):
    relationships = [e.relationship for e in product_graph.edges()]
    assert relationships == [Relationship.DEPENDS, Relationship.IMPLEMENTS]


def test_layer_and_role_buckets_are_exact(product_graph):
    for node in product_graph.nodes():
        assert node in product_graph.nodes_by_layer(node.layer)
        assert node in product_graph.nodes_by_role(node.role)
        for layer in Layer:
            if layer != node.layer:
                assert node not in product_graph.nodes_by_layer(layer)
        for role in (Role.ENTITY, Role.REPOSITORY, Role.ADAPTER):
            if role != node.role:
                assert node not in product_graph.nodes_by_role(role)


def test_edges_from_and_to(product_graph, product_nodes):
    adapter = product_nodes["PostgresProductRepository"].id
    port = product_nodes["ProductRepository"].id
    assert len(product_graph.edges_from(adapter)) == 2
    assert len(product_graph.edges_to(port)) == 2
    assert product_graph.edges_from(port) == []


def test_building_twice_is_structurally_equal(product_nodes):
    def build():
        builder = GraphBuilder()
        for node in product_nodes.values():
            builder.add_node(node)
        return builder.build()

    first, second = build(), build()
    assert set(first.nodes()) == set(second.nodes())
    assert first.edges() == second.edges()


def test_pretty_print_is_deterministic(product_graph):
    text = product_graph.pretty_print()
    assert text == product_graph.pretty_print()
    assert "Nodes: 3" in text
    assert "Edges: 2" in text
    assert "Domain: 1" in text


def test_ascii_art_groups_by_layer(product_graph):
    art = product_graph.to_ascii_art()
    assert "Domain Layer:" in art
    assert "└─ PostgresProductRepository" in art
    assert art.index("Domain Layer:") < art.index("Adapter Layer:")
