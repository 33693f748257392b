import logging

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from loyalize.core.config import DatabaseSettings, Settings, get_settings
from loyalize.core.logging import configure_logging
from loyalize.interfaces.http.errors import register_exception_handlers


def test_nested_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./other.db")
    monkeypatch.setenv("SERVER__PORT", "9100")
    monkeypatch.setenv("LOGGING__LEVEL", "debug")
    monkeypatch.setenv("API_PREFIX", "/v1")

    settings = Settings(_env_file=None)

    assert settings.database.url == "sqlite+aiosqlite:///./other.db"
    assert settings.server.port == 9100
    assert settings.log_level == "DEBUG"
    assert settings.api_prefix == "/v1"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()


def test_sqlalchemy_engine_logging_is_quiet_by_default():
    configure_logging(Settings(_env_file=None))
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def _app_with_failing_routes() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    @app.get("/gone")
    async def gone():
        raise HTTPException(status_code=404, detail="Thing not found")

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"id": item_id}

    return app


def test_unexpected_errors_render_generic_500(caplog):
    client = TestClient(_app_with_failing_routes(), raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="loyalize.interfaces.http.errors"):
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "database exploded" not in response.text
    assert "Unhandled error on GET /boom" in caplog.text


def test_http_errors_and_validation_share_the_error_envelope():
    client = TestClient(_app_with_failing_routes())

    assert client.get("/gone").json() == {"error": "Thing not found"}

    response = client.get("/items/abc")
    assert response.status_code == 400
    assert response.json()["error"][0]["loc"] == ["path", "item_id"]


def test_sync_url_swaps_async_drivers():
    assert DatabaseSettings(url="sqlite+aiosqlite:///./loyalize.db").sync_url == "sqlite:///./loyalize.db"
    assert (
        DatabaseSettings(url="postgresql+asyncpg://u:p@db/loyalize").sync_url
        == "postgresql://u:p@db/loyalize"
    )
    assert DatabaseSettings(url="mysql://u@db/x").sync_url == "mysql://u@db/x"
