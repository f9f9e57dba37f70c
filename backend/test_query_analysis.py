"""Fluent queries and structural analysis"""

from conftest import make_node
from hexgraph.graph import Edge, GraphBuilder, Layer, NodeId, Relationship, Role


def _cycle_graph():
    a = make_node("A", Layer.APPLICATION, Role.USE_CASE)
    b = make_node("B", Layer.APPLICATION, Role.USE_CASE)
    c = make_node("C", Layer.APPLICATION, Role.USE_CASE)
    graph = (
        GraphBuilder()
        .add_nodes([a, b, c])
        .add_edge(Edge(a.id, b.id, Relationship.DEPENDS))
        .add_edge(Edge(b.id, c.id, Relationship.DEPENDS))
        .add_edge(Edge(c.id, a.id, Relationship.DEPENDS))
        .build()
    )
    return graph, (a, b, c)


# -------------------------
# Query
# -------------------------

def test_query_filters_are_combined(product_graph):
    ports = product_graph.query().layer(Layer.PORT).execute()
    assert [n.type_name for n in ports] == ["ProductRepository"]

    repos = product_graph.query().type_name_contains("Repository").execute()
    assert len(repos) == 2
    assert product_graph.query().type_name_contains("Repository").layer(Layer.ADAPTER).count() == 1


def test_query_by_role_and_module(product_graph):
    assert product_graph.query().role(Role.ENTITY).first().type_name == "Product"
    assert product_graph.query().module_path_contains("adapters").count() == 1


def test_query_with_no_match_is_empty(product_graph):
    query = product_graph.query().layer(Layer.INFRASTRUCTURE)
    assert query.execute() == []
    assert query.count() == 0
    assert query.first() is None


def test_query_describes_its_filters(product_graph):
    query = product_graph.query().layer(Layer.PORT).type_name_contains("Repository")
    assert query.describe() == "layer=Port AND type_name~'Repository'"
    assert repr(query) == "<GraphQuery layer=Port AND type_name~'Repository'>"
    assert product_graph.query().role(Role.ENTITY).describe() == "role=Entity"
    assert product_graph.query().describe() == "all nodes"


# -------------------------
# Analysis
# -------------------------

def test_detect_cycles():
    graph, (a, b, c) = _cycle_graph()
    cycles = graph.analysis().detect_cycles()
    assert len(cycles) == 1
    assert set(cycles[0]) == {a.id, b.id, c.id}


def test_acyclic_graph_has_no_cycles(product_graph):
    assert product_graph.analysis().detect_cycles() == []


def test_cycle_detection_skips_dangling_edges():
    a = make_node("A", Layer.DOMAIN, Role.ENTITY)
    ghost = NodeId.from_name("shop.Ghost")
    graph = (
        GraphBuilder()
        .add_node(a)
        .add_edge(Edge(a.id, ghost, Relationship.DEPENDS))
        .add_edge(Edge(ghost, a.id, Relationship.DEPENDS))
        .build()
    )
    assert graph.analysis().detect_cycles() == []


def _chain(length):
    nodes = [make_node(f"C{i}", Layer.APPLICATION, Role.USE_CASE) for i in range(length)]
    builder = GraphBuilder().add_nodes(nodes)
    for source, target in zip(nodes, nodes[1:]):
        builder.add_edge(Edge(source.id, target.id, Relationship.DEPENDS))
    return builder, nodes


def test_long_chain_has_no_cycles():
    builder, _ = _chain(1500)
    assert builder.build().analysis().detect_cycles() == []


def test_long_cycle_is_found_once():
    builder, nodes = _chain(1500)
    graph = builder.add_edge(Edge(nodes[-1].id, nodes[0].id, Relationship.DEPENDS)).build()
    cycles = graph.analysis().detect_cycles()
    assert len(cycles) == 1
    assert set(cycles[0]) == {n.id for n in nodes}


def test_self_loop_is_a_cycle():
    a = make_node("A", Layer.DOMAIN, Role.ENTITY)
    graph = GraphBuilder().add_node(a).add_edge(Edge(a.id, a.id, Relationship.DEPENDS)).build()
    assert graph.analysis().detect_cycles() == [[a.id]]


def test_coupling(product_graph, product_nodes):
    analysis = product_graph.analysis()
    adapter = analysis.calculate_coupling(product_nodes["PostgresProductRepository"].id)
    assert (adapter.afferent, adapter.efferent, adapter.instability) == (0, 2, 1.0)

    port = analysis.calculate_coupling(product_nodes["ProductRepository"].id)
    assert (port.afferent, port.efferent, port.instability) == (2, 0, 0.0)

    assert analysis.calculate_coupling(NodeId.from_name("missing")) is None


def test_leaf_and_root_nodes(product_graph):
    analysis = product_graph.analysis()
    leaves = {n.type_name for n in analysis.find_leaf_nodes()}
    roots = {n.type_name for n in analysis.find_root_nodes()}
    assert leaves == {"Product", "ProductRepository"}
    assert roots == {"Product", "PostgresProductRepository"}


def test_identify_patterns():
    graph = (
        GraphBuilder()
        .add_node(make_node("OrderRepository", Layer.PORT, Role.REPOSITORY))
        .add_node(make_node("PlaceOrder", Layer.APPLICATION, Role.DIRECTIVE))
        .add_node(make_node("FindOrder", Layer.APPLICATION, Role.QUERY))
        .add_node(make_node("Order", Layer.DOMAIN, Role.AGGREGATE))
        .add_node(make_node("OrderPlaced", Layer.DOMAIN, Role.DOMAIN_EVENT))
        .build()
    )
    patterns = {p.name: p for p in graph.analysis().identify_patterns()}

    assert set(patterns) == {"Repository", "CQRS", "EventSourcing"}
    assert patterns["CQRS"].counts == {"directives": 1, "queries": 1}
    assert patterns["Repository"].counts == {"repositories": 1}


def test_no_patterns_in_empty_graph():
    assert GraphBuilder().build().analysis().identify_patterns() == []
