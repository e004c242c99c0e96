"""RPC layer: registry dispatch, envelopes, both channels and the typed stubs."""

import httpx
import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel

from conftest import at
from gratitude.rpc.channels import HttpChannel, InProcessChannel
from gratitude.rpc.clients import EntriesClient, MoodsClient, StatsClient
from gratitude.rpc.envelope import decode_envelope, encode_result
from gratitude.rpc.registry import ServiceRegistry
from gratitude.rpc.server import create_rpc_app
from gratitude.rpc.status import Err, Ok, StatusCode, invalid_argument
from gratitude.schemas.entry import CreateEntryRequest, ListEntriesRequest


class PingRequest(BaseModel):
    word: str = "ping"


class PingReply(BaseModel):
    word: str


class PingService:
    service_name = "test.Ping"
    rpc_methods = {
        "Echo": (PingRequest, "echo"),
        "Explode": (PingRequest, "explode"),
    }

    def echo(self, request):
        return Ok(PingReply(word=request.word))

    def explode(self, request):
        raise RuntimeError("secret stack detail")


class StaticChannel:
    """Channel double returning a canned result and recording calls."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def call(self, service, method, request):
        self.calls.append((service, method, request))
        return self.result

    def close(self):
        pass


# ============================================================================
# Registry
# ============================================================================

class TestServiceRegistry:

    @pytest.fixture
    def ping_registry(self):
        return ServiceRegistry([PingService()])

    def test_dispatch_returns_json_ready_value(self, ping_registry):
        result = ping_registry.dispatch("test.Ping", "Echo", {"word": "pong"})
        assert result == Ok({"word": "pong"})

    def test_missing_payload_uses_request_defaults(self, ping_registry):
        assert ping_registry.dispatch("test.Ping", "Echo", None).value == {"word": "ping"}

    @pytest.mark.parametrize("service, method", [("test.Ping", "Nope"), ("test.Missing", "Echo")])
    def test_unknown_method_is_unimplemented(self, ping_registry, service, method):
        result = ping_registry.dispatch(service, method, {})
        assert result.code == StatusCode.UNIMPLEMENTED

    def test_undecodable_request_is_invalid_argument(self, ping_registry):
        result = ping_registry.dispatch("test.Ping", "Echo", {"word": ["not", "a", "string"]})

        assert result.code == StatusCode.INVALID_ARGUMENT
        assert result.message.startswith("invalid request: word")

    def test_unexpected_exception_is_internal_and_opaque(self, ping_registry):
        result = ping_registry.dispatch("test.Ping", "Explode", {})

        assert result == Err(StatusCode.INTERNAL, "internal error")

    def test_bootstrap_registry_serves_all_three(self, registry):
        assert set(registry.services) == {"entries.Entries", "moods.Moods", "stats.Stats"}

    @pytest.mark.parametrize("service, method, key", [
        ("entries.Entries", "ListEntries", "entries"),
        ("moods.Moods", "ListMoods", "moods"),
    ])
    @pytest.mark.parametrize("limit", ["lots", None, [3], True])
    def test_list_with_unusable_limit_uses_default(self, registry, add_entries, add_moods,
                                                   service, method, key, limit):
        add_entries(*[at(0, minute=m) for m in range(3)])
        add_moods(*[("calm", at(0, minute=m)) for m in range(3)])

        result = registry.dispatch(service, method, {"limit": limit})

        assert result.ok
        assert len(result.value[key]) == 3

    def test_entry_timestamps_cross_as_iso_strings(self, registry):
        result = registry.dispatch("entries.Entries", "CreateEntry", {"text": "rain"})
        assert result.value["created_at"].startswith("2026-10-19T15:30:00")


# ============================================================================
# Envelope
# ============================================================================

class TestEnvelope:

    def test_encode_ok_and_err(self):
        assert encode_result(Ok({"a": 1})) == {"ok": True, "result": {"a": 1}}
        assert encode_result(invalid_argument("bad")) == {
            "ok": False, "code": "INVALID_ARGUMENT", "message": "bad",
        }

    def test_decode_round_trips_error_codes(self):
        body = {"ok": False, "code": "DEADLINE_EXCEEDED", "message": "slow"}
        assert decode_envelope(body) == Err(StatusCode.DEADLINE_EXCEEDED, "slow")

    def test_unknown_code_becomes_internal(self):
        body = {"ok": False, "code": "PERMISSION_DENIED", "message": "nope"}
        assert decode_envelope(body).code == StatusCode.INTERNAL

    @pytest.mark.parametrize("body", [None, [], "ok", {"result": {}}])
    def test_malformed_body_is_internal(self, body):
        assert decode_envelope(body) == Err(StatusCode.INTERNAL, "malformed response")


# ============================================================================
# Channels
# ============================================================================

class TestInProcessChannel:

    def test_call_dispatches_into_registry(self, registry):
        channel = InProcessChannel(registry)
        created = channel.call("entries.Entries", "CreateEntry", CreateEntryRequest(text="tea"))
        listed = channel.call("entries.Entries", "ListEntries", ListEntriesRequest(limit=5))

        assert created.ok
        assert [e["text"] for e in listed.value["entries"]] == ["tea"]


class TestHttpChannel:

    @pytest.fixture
    def rpc_http(self, registry):
        with TestClient(create_rpc_app(registry)) as client:
            yield client

    def test_round_trip_through_rpc_host(self, rpc_http):
        channel = HttpChannel("http://testserver", client=rpc_http)
        result = channel.call("entries.Entries", "CreateEntry", CreateEntryRequest(text="friends"))

        assert result.ok
        assert result.value["text"] == "friends"

    def test_remote_validation_error_keeps_its_code(self, rpc_http):
        channel = HttpChannel("http://testserver", client=rpc_http)
        result = channel.call("entries.Entries", "CreateEntry", CreateEntryRequest(text=" "))

        assert result == Err(StatusCode.INVALID_ARGUMENT, "text is required")

    def test_timeout_is_deadline_exceeded(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = httpx.Client(base_url="http://rpc", transport=httpx.MockTransport(handler))
        result = HttpChannel("http://rpc", client=client).call("stats.Stats", "GetOverview", PingRequest())

        assert result.code == StatusCode.DEADLINE_EXCEEDED

    def test_connection_failure_is_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        client = httpx.Client(base_url="http://rpc", transport=httpx.MockTransport(handler))
        result = HttpChannel("http://rpc", client=client).call("stats.Stats", "GetOverview", PingRequest())

        assert result == Err(StatusCode.UNAVAILABLE, "service unavailable")

    def test_http_error_status_is_unavailable(self):
        client = httpx.Client(
            base_url="http://rpc",
            transport=httpx.MockTransport(lambda request: httpx.Response(502, text="bad gateway")),
        )
        result = HttpChannel("http://rpc", client=client).call("moods.Moods", "ListMoods", PingRequest())

        assert result.code == StatusCode.UNAVAILABLE

    def test_non_json_body_is_internal(self):
        client = httpx.Client(
            base_url="http://rpc",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")),
        )
        result = HttpChannel("http://rpc", client=client).call("moods.Moods", "ListMoods", PingRequest())

        assert result == Err(StatusCode.INTERNAL, "malformed response")


class TestRpcHost:

    def test_non_json_request_is_invalid_argument(self, registry):
        with TestClient(create_rpc_app(registry)) as client:
            response = client.post(
                "/rpc/entries.Entries/CreateEntry",
                content=b"text=hello",
                headers={"content-type": "application/x-www-form-urlencoded"},
            )

        assert response.status_code == 200
        assert response.json()["code"] == "INVALID_ARGUMENT"

    def test_healthz_lists_services(self, registry):
        with TestClient(create_rpc_app(registry)) as client:
            body = client.get("/healthz").json()

        assert body["ok"] is True
        assert "stats.Stats" in body["services"]


# ============================================================================
# Typed stubs
# ============================================================================

class TestClients:

    def test_list_entries_unwraps_collection(self, registry):
        client = EntriesClient(InProcessChannel(registry))
        client.create_entry("books")

        result = client.list_entries(10)
        assert [e.text for e in result.value] == ["books"]

    def test_errors_pass_through_untouched(self):
        err = Err(StatusCode.UNAVAILABLE, "service unavailable")
        assert MoodsClient(StaticChannel(err)).list_moods(5) is err

    def test_malformed_payload_is_internal(self):
        result = StatsClient(StaticChannel(Ok({"total_entries": "lots"}))).get_overview()
        assert result == Err(StatusCode.INTERNAL, "malformed response")

    def test_request_is_built_from_arguments(self):
        channel = StaticChannel(Ok({"moods": []}))
        MoodsClient(channel).list_moods(12)

        service, method, request = channel.calls[0]
        assert (service, method, request.limit) == ("moods.Moods", "ListMoods", 12)
