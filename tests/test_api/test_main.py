"""Tests for the API entry point."""

import api.main as main_module


def test_main_serves_on_configured_host_and_port(monkeypatch):
    calls = {}

    def fake_run(app, host, port):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)
    monkeypatch.setattr(main_module.settings, "API_HOST", "127.0.0.1")
    monkeypatch.setattr(main_module.settings, "API_PORT", 9123)

    main_module.main()

    assert calls == {"app": main_module.app, "host": "127.0.0.1", "port": 9123}
