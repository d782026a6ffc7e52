import logging

from fastapi.testclient import TestClient
from sqlalchemy import inspect

from product_api.core.db import Database, connect_db
from product_api.main import create_app
from tests.conftest import API_URL, FRONTEND_URL


def unreachable_database(tmp_path) -> Database:
    # SQLite cannot create a file inside a directory that does not exist
    return Database(f"sqlite:///{tmp_path}/missing/products.db")


def test_connect_db_creates_schema(database):
    assert connect_db(database) is True
    assert "products" in inspect(database.engine).get_table_names()


def test_connect_db_logs_error_when_unreachable(tmp_path, caplog):
    database = unreachable_database(tmp_path)
    with caplog.at_level(logging.ERROR, logger="product_api.core.db"):
        assert connect_db(database) is False

    assert "There was an error connecting to the database" in caplog.text


def test_app_starts_without_database(settings, tmp_path, caplog):
    """
    Boot does not fail when the database is down; the first request that
    needs it gets a 500 and the app keeps serving.
    """
    app = create_app(settings, unreachable_database(tmp_path))
    with caplog.at_level(logging.ERROR):
        with TestClient(app, raise_server_exceptions=False) as client:
            assert client.get("/api/products").status_code == 500
            assert client.get("/api/products/abc").status_code == 400
            assert client.get("/docs/openapi.json").status_code == 200

    assert "There was an error connecting to the database" in caplog.text


def test_request_without_origin_is_allowed(client):
    response = client.get("/api/products")
    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


def test_allowed_origins_get_cors_headers(client):
    for origin in (FRONTEND_URL, API_URL):
        response = client.get("/api/products", headers={"Origin": origin})
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == origin


def test_unknown_origin_is_rejected(client):
    response = client.get("/api/products", headers={"Origin": "http://evil.example"})
    assert response.status_code == 403
    assert response.json() == {"error": "Not allowed by CORS"}


def test_preflight_from_allowed_origin(client):
    response = client.options(
        "/api/products",
        headers={"Origin": FRONTEND_URL, "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == FRONTEND_URL


def test_empty_origin_settings_are_dropped(settings):
    settings.API_URL = ""
    assert settings.allowed_origins == [FRONTEND_URL]


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="product_api.access"):
        client.get("/api/products")

    assert any(
        r.name == "product_api.access" and r.getMessage().startswith("GET /api/products 200")
        for r in caplog.records
    )


def test_docs_describe_the_product_routes(client):
    assert client.get("/docs").status_code == 200

    document = client.get("/docs/openapi.json").json()
    paths = document["paths"]
    assert set(paths) == {"/api/products", "/api/products/{id}"}
    assert set(paths["/api/products"]) == {"get", "post"}
    assert set(paths["/api/products/{id}"]) == {"get", "put", "patch", "delete"}

    post_body = paths["/api/products"]["post"]["requestBody"]["content"]["application/json"]
    assert set(post_body["schema"]["properties"]) >= {"name", "price"}
    assert paths["/api/products/{id}"]["get"]["parameters"][0]["name"] == "id"
