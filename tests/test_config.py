from reencoder.config import AppConfig, load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("REENCODER_MAX_UPLOAD_MB", raising=False)
    monkeypatch.delenv("REENCODER_DEFAULT_TARGET", raising=False)

    config = load_config()
    assert config == AppConfig()
    assert config.max_upload_bytes == 50 * 1024 * 1024


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("REENCODER_MAX_UPLOAD_MB", "2")
    monkeypatch.setenv("REENCODER_DEFAULT_TARGET", "utf-16")

    config = load_config()
    assert config.max_upload_bytes == 2 * 1024 * 1024
    assert config.default_target == "utf-16"
