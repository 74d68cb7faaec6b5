from quote_transforms.config import Config


def test_defaults_without_environment(monkeypatch):
    monkeypatch.delenv("QUOTE_TRANSFORMS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("QUOTE_TRANSFORMS_OUTPUT_FORMAT", raising=False)
    config = Config()
    assert config.log_level == "WARNING"
    assert config.output_format == "tree"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("QUOTE_TRANSFORMS_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUOTE_TRANSFORMS_OUTPUT_FORMAT", "html")
    config = Config()
    assert config.log_level == "DEBUG"
    assert config.output_format == "html"


def test_unknown_values_fall_back(monkeypatch):
    monkeypatch.setenv("QUOTE_TRANSFORMS_OUTPUT_FORMAT", "xml")
    config = Config(log_level="chatty")
    assert config.log_level == "WARNING"
    assert config.output_format == "tree"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("QUOTE_TRANSFORMS_LOG_LEVEL", "ERROR")
    assert Config(log_level="INFO").log_level == "INFO"
