"""Introspection HTTP server"""

import pytest
from fastapi.testclient import TestClient

from hexgraph.graph import Layer, Role
from hexgraph.registry import component


@pytest.fixture
def shop(registry):
    @component(Layer.DOMAIN, Role.ENTITY, name="shop.Product")
    class Product:
        pass

    @component(Layer.PORT, Role.REPOSITORY, name="shop.ProductRepository")
    class ProductRepository:
        pass

    @component(Layer.ADAPTER, Role.ADAPTER, name="shop.PostgresProductRepository",
               depends_on=[ProductRepository])
    class PostgresProductRepository(ProductRepository):
        pass

    return registry


@pytest.fixture
def test_client(shop):
    from hexgraph.main import app

    return TestClient(app)


def test_health(test_client):
    assert test_client.get("/health").json() == {"status": "ok"}


def test_graph_summary(test_client):
    data = test_client.get("/graph").json()
    assert data["node_count"] == 3
    assert data["edge_count"] == 1
    assert data["component_count"] == 3
    assert data["layers"]["Domain"] == 1


def test_list_nodes_with_filters(test_client):
    data = test_client.get("/graph/nodes").json()
    assert data["count"] == 3

    ports = test_client.get("/graph/nodes", params={"layer": "port"}).json()
    assert [n["type_name"] for n in ports["nodes"]] == ["ProductRepository"]

    adapters = test_client.get("/graph/nodes", params={"role": "Adapter"}).json()
    assert adapters["count"] == 1


def test_list_edges(test_client):
    data = test_client.get("/graph/edges").json()
    assert data["count"] == 1
    assert data["edges"][0]["relationship"] == "Depends"


def test_export_formats(test_client):
    for fmt, marker in [("dot", "digraph"), ("mermaid", "graph TD"), ("json", '"nodes"'), ("d2", "direction:")]:
        response = test_client.get(f"/graph/export/{fmt}")
        assert response.status_code == 200
        assert marker in response.json()["source"]


def test_export_raw(test_client):
    response = test_client.get("/graph/export/mmd/raw")
    assert response.status_code == 200
    assert response.text.startswith("graph TD")


def test_unknown_format_is_404(test_client):
    response = test_client.get("/graph/export/svg")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "error"
    assert body["code"] == "E_HEX_VIZ_404"


def test_context_and_pack(test_client):
    context = test_client.get("/graph/context").json()
    assert context["architecture"] == "hexagonal"
    assert context["metadata"]["total_components"] == 3

    pack = test_client.get("/graph/pack").json()
    assert pack["schema_version"] == "1.0.0"
    assert len(pack["graph"]["nodes"]) == 3


def test_validate_and_analysis(test_client):
    report = test_client.get("/graph/validate").json()
    assert report["report"]["is_valid"] is True

    analysis = test_client.get("/graph/analysis").json()
    assert analysis["cycles"] == []
    assert [p["name"] for p in analysis["patterns"]] == ["Repository"]
    assert len(analysis["coupling"]) == 3


def test_refresh_picks_up_new_components(test_client):
    assert test_client.get("/graph").json()["node_count"] == 3

    @component(Layer.APPLICATION, Role.USE_CASE, name="shop.ListProducts")
    class ListProducts:
        pass

    assert test_client.get("/graph").json()["node_count"] == 3
    refreshed = test_client.post("/graph/refresh").json()
    assert refreshed["node_count"] == 4
    assert test_client.get("/graph").json()["node_count"] == 4
