import json

import httpx
import pytest

from application.submissions import SubmissionLog
from domain.errors import StoreUnavailableError
from infrastructure.config import build_app_config
from infrastructure.stores import KvRestListStore, make_store
from infrastructure.stores.base import resolve_range

TOKEN = "test-token"


class FakeUpstash:
    """Minimal Upstash REST server: list commands over a dict."""

    def __init__(self, decode_json: bool = False) -> None:
        self.lists: dict[str, list] = {}
        self.commands: list[list] = []
        self.decode_json = decode_json

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.headers.get("Authorization") != f"Bearer {TOKEN}":
            return httpx.Response(401, json={"error": "Unauthorized"})

        cmd = json.loads(request.content)
        self.commands.append(cmd)
        name, key, *args = cmd
        values = self.lists.setdefault(key, [])

        if name == "LPUSH":
            values.insert(0, args[0])
            return httpx.Response(200, json={"result": len(values)})
        if name == "LTRIM":
            lo, hi = resolve_range(len(values), int(args[0]), int(args[1]))
            self.lists[key] = values[lo:hi]
            return httpx.Response(200, json={"result": "OK"})
        if name == "LRANGE":
            lo, hi = resolve_range(len(values), int(args[0]), int(args[1]))
            out = values[lo:hi]
            if self.decode_json:
                out = [json.loads(v) for v in out]
            return httpx.Response(200, json={"result": out})
        if name == "DEL":
            existed = bool(self.lists.pop(key, None))
            return httpx.Response(200, json={"result": int(existed)})
        return httpx.Response(400, json={"error": f"ERR unknown command '{name}'"})


def _store(handler, token: str = TOKEN) -> KvRestListStore:
    client = httpx.Client(
        base_url="https://kv.example.test",
        transport=httpx.MockTransport(handler),
        headers={"Authorization": f"Bearer {token}"},
    )
    return KvRestListStore(cfg=None, client=client)


def test_commands_are_sent_as_json_arrays() -> None:
    server = FakeUpstash()
    store = _store(server)

    assert store.lpush("coffee-surveys", "a") == 1
    assert store.lpush("coffee-surveys", "b") == 2
    store.ltrim("coffee-surveys", 0, 0)
    assert store.lrange("coffee-surveys", 0, 99) == ["b"]
    assert store.delete("coffee-surveys") == 1

    assert server.commands[0] == ["LPUSH", "coffee-surveys", "a"]
    assert server.commands[2] == ["LTRIM", "coffee-surveys", 0, 0]


def test_error_reply_raises_store_unavailable() -> None:
    store = _store(FakeUpstash(), token="wrong")

    with pytest.raises(StoreUnavailableError, match="Unauthorized"):
        store.lrange("coffee-surveys", 0, 99)


def test_transport_failure_raises_store_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(StoreUnavailableError):
        _store(handler).lpush("coffee-surveys", "x")


def test_non_json_reply_raises_store_unavailable() -> None:
    store = _store(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(StoreUnavailableError, match="non-JSON"):
        store.delete("coffee-surveys")


def test_submission_log_over_kv_rest(cfg, clock, aya_payload) -> None:
    server = FakeUpstash()
    log = SubmissionLog.from_cfg(cfg, _store(server), clock=clock)

    record = log.append(aya_payload)

    assert log.list_recent() == [record]
    assert [c[0] for c in server.commands] == ["LPUSH", "LTRIM", "LRANGE"]


def test_pre_decoded_entries_pass_through(cfg, clock, aya_payload) -> None:
    server = FakeUpstash(decode_json=True)
    log = SubmissionLog.from_cfg(cfg, _store(server), clock=clock)

    record = log.append(aya_payload)

    assert log.list_recent() == [record]


def test_factory_builds_kv_rest_store_from_env() -> None:
    cfg = build_app_config(
        {"store": {"backend": "kv_rest"}},
        env={"KV_REST_API_URL": "https://kv.example.test/", "KV_REST_API_TOKEN": TOKEN},
    )

    store = make_store(cfg)
    try:
        assert isinstance(store, KvRestListStore)
        assert str(store.client.base_url).rstrip("/") == "https://kv.example.test"
        assert store.client.headers["Authorization"] == f"Bearer {TOKEN}"
    finally:
        store.close()
