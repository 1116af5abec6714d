import pytest
from fastapi.testclient import TestClient

from evm_mcp import MCP_SERVER_NAME, MCP_SERVER_VERSION
from evm_mcp.rpc import RpcError, default_client
from evm_mcp.server import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fake_rpc(monkeypatch):
    calls = []

    async def fake_call(method, params=None):
        calls.append((method, params))
        if method == "eth_blockNumber":
            raise RpcError("RPC call failed: timeout")
        return "0x1"

    monkeypatch.setattr(default_client, "call", fake_call)
    return calls


def test_health_route(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json().get("status") == "ok"
    assert isinstance(resp.json().get("chainId"), int)
    assert "X-Request-ID" in resp.headers


def test_tools_route(client):
    resp = client.get("/tools")
    assert resp.status_code == 200
    assert len(resp.json()["tools"]) == 19


def test_mcp_initialize(client):
    payload = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "initialize",
        "params": {"protocolVersion": "2025-03-26", "capabilities": {}, "clientInfo": {"name": "test", "version": "0.0.1"}},
    }
    resp = client.post("/mcp", json=payload)
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["protocolVersion"] == "2025-03-26"
    assert result["serverInfo"] == {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION}
    assert result["capabilities"]["tools"]["listChanged"] is False


def test_mcp_initialize_requires_protocol_version(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}})
    assert resp.json()["error"]["code"] == -32602


def test_mcp_list_tools_aliases(client):
    for method in ("tools/list", "list_tools"):
        resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 2, "method": method})
        assert resp.status_code == 200
        tools = resp.json()["result"]["tools"]
        assert any(tool["name"] == "eth_getBalance" for tool in tools)


def test_mcp_tools_call(client, fake_rpc):
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 3,
            "method": "tools/call",
            "params": {"name": "eth_chainId", "arguments": {}},
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == 3
    content = body["result"]["content"][0]
    assert content["type"] == "text"
    assert "**chain_name:** Ethereum Mainnet" in content["text"]
    assert fake_rpc == [("eth_chainId", None)]


def test_mcp_tools_call_error_is_in_band(client, fake_rpc):
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 4, "method": "call_tool", "params": {"tool": "eth_blockNumber", "params": {}}},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert "error" not in body
    assert body["result"]["content"][0]["text"] == "Error: RPC call failed: timeout"


def test_mcp_tools_call_rejects_string_boolean(client, fake_rpc):
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 7,
            "method": "tools/call",
            "params": {
                "name": "eth_getBlockByNumber",
                "arguments": {"blockNumber": "latest", "includeTransactions": "false"},
            },
        },
    )
    assert resp.status_code == 200
    text = resp.json()["result"]["content"][0]["text"]
    assert text.startswith("Error: Invalid parameters: argument 'includeTransactions'")
    assert fake_rpc == []


def test_mcp_tools_call_missing_name(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 5, "method": "tools/call", "params": {}})
    assert resp.json()["error"] == {"code": -32602, "message": "Invalid params"}


def test_mcp_parse_error(client):
    resp = client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32700


def test_mcp_invalid_request(client):
    resp = client.post("/mcp", json=[1, 2, 3])
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32600


def test_mcp_method_not_found(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 6, "method": "resources/list"})
    assert resp.json()["error"]["code"] == -32601


def test_mcp_initialized_notification(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert resp.status_code == 204
    assert resp.content == b""


def test_metrics_route_counts_requests_and_tools(client, fake_rpc):
    client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 7, "method": "tools/call", "params": {"name": "net_version", "arguments": {}}},
    )
    data = client.get("/metrics").json()
    assert data["requests"] >= 1
    assert data["tool_success"] == {"net_version": 1}
