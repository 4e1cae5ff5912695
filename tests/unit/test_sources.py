"""Unit tests for the Supabase and YAML profile sources."""

import asyncio
from pathlib import Path

import httpx
import pytest

from vitae.contexts.intake.exceptions import ProfileFetchError
from vitae.contexts.intake.sources import (
    NEWEST_PROFILE_QUERY,
    SupabaseProfileSource,
    YAMLProfileSource,
    newest_record,
)

FIXTURES_PATH = Path(__file__).resolve().parent.parent / "fixtures"
URL = "https://demo.supabase.co"
KEY = "anon-key"


def fetch_with(handler):
    """Run fetch_newest against a mocked PostgREST endpoint."""

    async def scenario():
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as client:
            source = SupabaseProfileSource(url=URL, api_key=KEY, client=client)
            return await source.fetch_newest()

    return asyncio.run(scenario())


@pytest.mark.unit
def test_supabase_request_contract():
    """Test that the query asks for all columns, newest first, one row."""
    captured = {}

    def handler(request):
        captured["request"] = request
        return httpx.Response(200, json=[{"nombre_completo": "Laura"}])

    record = fetch_with(handler)
    request = captured["request"]

    assert record == {"nombre_completo": "Laura"}
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/perfil"
    assert dict(request.url.params) == NEWEST_PROFILE_QUERY
    assert request.url.params["order"] == "creado_en.desc"
    assert request.url.params["limit"] == "1"
    assert request.headers["apikey"] == KEY
    assert request.headers["authorization"] == f"Bearer {KEY}"


@pytest.mark.unit
def test_supabase_empty_table_returns_none():
    assert fetch_with(lambda request: httpx.Response(200, json=[])) is None


@pytest.mark.unit
def test_supabase_error_status_raises():
    def handler(request):
        return httpx.Response(401, json={"message": "Invalid API key"})

    with pytest.raises(ProfileFetchError) as exc_info:
        fetch_with(handler)

    assert exc_info.value.status_code == 401
    assert "Invalid API key" in str(exc_info.value)


@pytest.mark.unit
def test_supabase_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProfileFetchError, match="connection refused"):
        fetch_with(handler)


@pytest.mark.unit
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"nombre_completo": "Laura"}),
    ],
)
def test_supabase_unexpected_body_raises(response):
    with pytest.raises(ProfileFetchError):
        fetch_with(lambda request: response)


@pytest.mark.unit
@pytest.mark.parametrize("url, key", [("", KEY), (URL, "")])
def test_supabase_requires_configuration(url, key):
    with pytest.raises(ValueError):
        SupabaseProfileSource(url=url, api_key=key)


@pytest.mark.unit
def test_supabase_endpoint_and_description():
    source = SupabaseProfileSource(url=f"{URL}/", api_key=KEY, table="perfiles")

    assert source.endpoint == f"{URL}/rest/v1/perfiles"
    assert "perfiles" in source.describe()


@pytest.mark.unit
def test_yaml_single_record():
    source = YAMLProfileSource(FIXTURES_PATH / "profile_full.yaml")

    record = asyncio.run(source.fetch_newest())

    assert record["nombre_completo"] == "Laura Gómez Restrepo"
    assert record["salario_deseado"] == 5000000


@pytest.mark.unit
def test_yaml_list_picks_newest():
    """Test that a list file follows the same newest-first contract as the hosted query."""
    source = YAMLProfileSource(FIXTURES_PATH / "profiles_list.yaml")

    record = asyncio.run(source.fetch_newest())

    assert record["nombre_completo"] == "Perfil nuevo"


@pytest.mark.unit
def test_yaml_empty_list_returns_none():
    source = YAMLProfileSource(FIXTURES_PATH / "empty_list.yaml")
    assert asyncio.run(source.fetch_newest()) is None


@pytest.mark.unit
def test_yaml_missing_file_raises(tmp_path):
    source = YAMLProfileSource(tmp_path / "missing.yaml")

    with pytest.raises(ProfileFetchError, match="not found"):
        asyncio.run(source.fetch_newest())


@pytest.mark.unit
def test_newest_record_without_dates():
    rows = [{"nombre_completo": "A"}, {"nombre_completo": "B"}]
    assert newest_record(rows) == {"nombre_completo": "A"}
    assert newest_record([]) is None
