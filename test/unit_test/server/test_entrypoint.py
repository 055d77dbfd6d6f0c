"""Unit tests for the uvicorn entry point."""

from unittest.mock import patch

from formforge.server import __main__ as entrypoint


def test_run_uses_configured_host_and_port(monkeypatch):
    monkeypatch.setattr(entrypoint.settings, "server_host", "127.0.0.1")
    monkeypatch.setattr(entrypoint.settings, "server_port", 8123)

    with patch.object(entrypoint.uvicorn, "run") as run:
        entrypoint.run()

    run.assert_called_once_with("formforge.server.main:app", host="127.0.0.1", port=8123, log_config=None)
