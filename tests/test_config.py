import app.config as config


def test_get_env_uses_fallback_when_missing(monkeypatch):
    monkeypatch.delenv("HELLO_WORLD_UNSET", raising=False)
    assert config.get_env("HELLO_WORLD_UNSET", "fallback") == "fallback"


def test_get_env_reads_environment(monkeypatch):
    monkeypatch.setenv("HELLO_WORLD_SET", "value")
    assert config.get_env("HELLO_WORLD_SET", "fallback") == "value"


def test_get_env_keeps_empty_value(monkeypatch):
    monkeypatch.setenv("HELLO_WORLD_SET", "")
    assert config.get_env("HELLO_WORLD_SET", "fallback") == ""


def test_resolve_port_defaults_to_8080(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert config.resolve_port() == "8080"


def test_resolve_port_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert config.resolve_port() == "9090"


def test_resolve_port_does_not_validate(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert config.resolve_port() == "not-a-port"
