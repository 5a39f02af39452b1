from __future__ import annotations

import pytest

import video_recipe.__main__ as entrypoint


class TestMain:
    def test_runs_app_with_configured_address(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        monkeypatch.setattr(entrypoint.settings, "HOST", "127.0.0.1")
        monkeypatch.setattr(entrypoint.settings, "PORT", 9000)
        monkeypatch.setattr(entrypoint.settings, "APP_ENV", "production")

        entrypoint.main()

        assert calls == [
            (
                "video_recipe.app.main:app",
                {"host": "127.0.0.1", "port": 9000, "reload": False, "log_level": "info"},
            )
        ]
