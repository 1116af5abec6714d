from evm_mcp import __main__ as entry
from evm_mcp.config import EvmConfig

CONFIGURED = EvmConfig(rpc_url="http://localhost:8545", log_format="plain")


def test_missing_rpc_url_exits_with_one(capsys):
    code = entry.main([], config=EvmConfig(rpc_url=None))
    assert code == 1
    err = capsys.readouterr().err
    assert "RPC_URL environment variable is required" in err


def test_stdio_transport_runs_and_exits_cleanly(monkeypatch):
    calls = []
    monkeypatch.setattr(entry, "_run_stdio", lambda: calls.append("stdio"))
    assert entry.main([], config=CONFIGURED) == 0
    assert calls == ["stdio"]


def test_http_transport_uses_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(entry, "_run_http", lambda host, port: calls.append((host, port)))
    assert entry.main(["--transport", "http", "--host", "0.0.0.0", "--port", "9000"], config=CONFIGURED) == 0
    assert calls == [("0.0.0.0", 9000)]


def test_fatal_startup_error_exits_with_one(monkeypatch):
    def boom():
        raise RuntimeError("stdio closed")

    monkeypatch.setattr(entry, "_run_stdio", boom)
    assert entry.main([], config=CONFIGURED) == 1
