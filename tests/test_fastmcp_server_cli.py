"""CLI-level coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import pytest

from logic_gates_mcp_server import main as server_main
from logic_gates_mcp_server.tools import build_server


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture()
def dummy_app(monkeypatch: pytest.MonkeyPatch) -> _DummyApp:
    """Replace the FastMCP app factory and clear environment settings."""
    for name in ("TRANSPORT", "HOST", "PORT", "PATH", "LOG_LEVEL"):
        monkeypatch.delenv(f"LOGIC_GATES_{name}", raising=False)
    app = _DummyApp()
    monkeypatch.setattr(
        server_main, "build_fastmcp_app", lambda: (app, build_server())
    )
    return app


def test_main_runs_fastmcp_with_transport(dummy_app: _DummyApp) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    assert exit_code == 0
    assert dummy_app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_main_defaults_to_stdio(dummy_app: _DummyApp) -> None:
    """Without flags the server runs over stdio with no network options."""
    assert server_main.main([]) == 0

    assert dummy_app.run_calls == [{"transport": "stdio"}]


def test_main_reads_environment(
    dummy_app: _DummyApp, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Environment variables seed the defaults that flags can override."""
    monkeypatch.setenv("LOGIC_GATES_TRANSPORT", "sse")
    monkeypatch.setenv("LOGIC_GATES_PORT", "9100")

    assert server_main.main(["--host", "0.0.0.0"]) == 0

    assert dummy_app.run_calls == [
        {"transport": "sse", "host": "0.0.0.0", "port": 9100, "path": "/mcp"}
    ]


def test_main_catalog_prints_tools(
    dummy_app: _DummyApp, capsys: pytest.CaptureFixture[str]
) -> None:
    """--catalog prints discovery JSON instead of serving."""
    assert server_main.main(["--catalog"]) == 0

    catalog = json.loads(capsys.readouterr().out)
    assert {tool["name"] for tool in catalog["tools"]} == {
        "and_gate",
        "or_gate",
        "xor_gate",
    }
    assert dummy_app.run_calls == []


def test_main_rejects_invalid_port(dummy_app: _DummyApp) -> None:
    """Out-of-range ports are usage errors."""
    with pytest.raises(SystemExit) as exit_info:
        server_main.main(["--transport", "http", "--port", "0"])

    assert exit_info.value.code == 2
    assert dummy_app.run_calls == []
