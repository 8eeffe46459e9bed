"""
Tests for the command line entry point.

uvicorn.run is replaced so no socket is ever opened.
"""

import pytest
import uvicorn
from fastapi import FastAPI

from userapi.cli import main


class TestServeCommand:
    """Tests for ``userapi serve``."""

    def test_serve_uses_default_bind_address(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

        main(["serve"])

        assert len(calls) == 1
        app, kwargs = calls[0]
        assert isinstance(app, FastAPI)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 3000

    def test_serve_accepts_overrides(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

        main(["serve", "--host", "127.0.0.1", "--port", "4000", "--log-level", "debug"])

        assert calls == [{"host": "127.0.0.1", "port": 4000, "log_level": "debug"}]

    def test_bind_failure_is_fatal(self, monkeypatch) -> None:
        def fail(app, **kwargs):
            raise OSError(98, "Address already in use")

        monkeypatch.setattr(uvicorn, "run", fail)

        with pytest.raises(SystemExit) as excinfo:
            main(["serve"])
        assert excinfo.value.code == 1

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
