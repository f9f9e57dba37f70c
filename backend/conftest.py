"""Shared fixtures: an isolated registration collection and a sample shop graph."""

import pytest

from hexgraph.graph import Edge, GraphBuilder, Layer, Node, NodeId, Relationship, Role
from hexgraph.registry import component_registry


@pytest.fixture
def registry(monkeypatch):
    """Fresh process registry and graph cache for one test."""
    fresh = component_registry.ComponentRegistry()
    monkeypatch.setattr(component_registry, "_global_registry", fresh)
    monkeypatch.setattr(component_registry, "_current_graph", None)
    return fresh


def make_node(name, layer, role, module="shop"):
    return Node(
        id=NodeId.from_name(f"{module}.{name}"),
        layer=layer,
        role=role,
        type_name=name,
        module_path=module,
    )


@pytest.fixture
def product_nodes():
    return {
        "Product": make_node("Product", Layer.DOMAIN, Role.ENTITY, "shop.domain"),
        "ProductRepository": make_node("ProductRepository", Layer.PORT, Role.REPOSITORY, "shop.ports"),
        "PostgresProductRepository": make_node(
            "PostgresProductRepository", Layer.ADAPTER, Role.ADAPTER, "shop.adapters"
        ),
    }


@pytest.fixture
def product_graph(product_nodes):
    """Product / ProductRepository / PostgresProductRepository with Depends and Implements edges."""
    adapter = product_nodes["PostgresProductRepository"].id
    port = product_nodes["ProductRepository"].id
    return (
        GraphBuilder()
        .add_nodes(product_nodes.values())
        .add_edge(Edge(adapter, port, Relationship.DEPENDS))
        .add_edge(Edge(adapter, port, Relationship.IMPLEMENTS))
        .build()
    )
