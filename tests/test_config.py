"""Configuration and logging tests."""

import io
import json
import logging

import pytest
from roadroute_core.utils.config import (
    ConfigSource,
    RouteConfigError,
    RouterConfig,
    RouteSpec,
    load_config,
)
from roadroute_core.utils.helpers import normalize_methods, setup_logging

ROUTES_YAML = """
log_level: DEBUG
routes:
  - pattern: /users/:user_id
    methods: [get]
    name: get_user
    handler: get_user
    priority: 10
  - pattern: /health
"""


class TestRouterConfig:
    """Test RouterConfig class."""

    def test_defaults(self):
        """Test default values."""
        config = RouterConfig()
        assert config.log_level == "INFO"
        assert config.log_format == "text"
        assert config.log_unmatched is False
        assert config.routes == []
        assert config.source is ConfigSource.DEFAULT

    def test_from_dict(self):
        """Test unknown keys are dropped and routes normalized."""
        config = RouterConfig.from_dict({
            "log_level": "WARNING",
            "port": 8080,
            "routes": [{"pattern": "/a", "methods": ["get"]}],
        })

        assert config.log_level == "WARNING"
        assert config.source is ConfigSource.DICT
        assert config.routes == [RouteSpec(pattern="/a", methods=["GET"])]

    def test_from_json(self, tmp_path):
        """Test loading JSON."""
        path = tmp_path / "routes.json"
        path.write_text(json.dumps({"routes": [{"pattern": "/a"}]}))

        config = RouterConfig.from_json(str(path))
        assert config.source is ConfigSource.FILE
        assert config.routes[0].pattern == "/a"
        assert config.routes[0].methods == ["*"]

    def test_from_yaml(self, tmp_path):
        """Test loading YAML."""
        path = tmp_path / "routes.yaml"
        path.write_text(ROUTES_YAML)

        config = RouterConfig.from_yaml(str(path))
        assert config.log_level == "DEBUG"
        assert len(config.routes) == 2
        assert config.routes[0].methods == ["GET"]
        assert config.routes[0].priority == 10
        assert config.routes[1].name == ""

    def test_empty_yaml(self, tmp_path):
        """Test empty file gives defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert RouterConfig.from_yaml(str(path)).routes == []

    def test_list_root_yaml(self, tmp_path):
        """Test file whose root is a list of routes."""
        path = tmp_path / "routes.yaml"
        path.write_text("- pattern: /a\n")

        with pytest.raises(RouteConfigError) as info:
            load_config(str(path))
        assert "mapping" in str(info.value)

    def test_scalar_root_json(self, tmp_path):
        """Test JSON file holding a bare string."""
        path = tmp_path / "routes.json"
        path.write_text('"/a"')

        with pytest.raises(RouteConfigError):
            RouterConfig.from_json(str(path))

    def test_from_env(self, monkeypatch):
        """Test environment variables."""
        monkeypatch.setenv("ROADROUTE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ROADROUTE_LOG_UNMATCHED", "true")

        config = RouterConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.log_unmatched is True
        assert config.source is ConfigSource.ENV

    def test_numeric_log_level_from_env(self, monkeypatch):
        """Test numeric level stays a string setting."""
        monkeypatch.setenv("ROADROUTE_LOG_LEVEL", "10")

        config = load_config()
        assert config.log_level == "10"

        logger = config.configure_logging(stream=io.StringIO())
        try:
            assert logger.level == logging.DEBUG
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_configure_logging_json(self, tmp_path):
        """Test log_format from a config file drives the log output."""
        path = tmp_path / "routes.yaml"
        path.write_text("log_level: debug\nlog_format: json\n")
        stream = io.StringIO()

        config = load_config(str(path))
        logger = config.configure_logging(stream=stream)
        try:
            logging.getLogger("roadroute_core.routing.router").debug("routed")
            entry = json.loads(stream.getvalue().splitlines()[0])
            assert entry["message"] == "routed"
            assert entry["level"] == "DEBUG"
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

    def test_merge(self):
        """Test overrides take precedence."""
        config = RouterConfig.from_dict({"routes": [{"pattern": "/a"}]})
        merged = config.merge({"log_format": "json"})

        assert merged.log_format == "json"
        assert merged.routes == config.routes

    def test_to_dict_round_trip(self):
        """Test dictionary export loads back."""
        config = RouterConfig.from_dict({
            "routes": [{"pattern": "/a", "name": "a", "metadata": {"x": 1}}],
        })
        assert RouterConfig.from_dict(config.to_dict()) == config


class TestRouteSpec:
    """Test route entry validation."""

    def test_missing_pattern(self):
        """Test entry without pattern."""
        with pytest.raises(RouteConfigError):
            RouteSpec.from_dict({"name": "a"})

    def test_not_a_mapping(self):
        """Test non-mapping entry."""
        with pytest.raises(RouteConfigError):
            RouterConfig.from_dict({"routes": ["/a"]})

    def test_is_value_error(self):
        """Test error type hierarchy."""
        assert issubclass(RouteConfigError, ValueError)


class TestLoadConfig:
    """Test layered config loading."""

    def test_no_path(self, monkeypatch):
        """Test defaults only."""
        monkeypatch.delenv("ROADROUTE_LOG_LEVEL", raising=False)
        config = load_config()
        assert config.log_level == "INFO"

    def test_file_then_env(self, tmp_path, monkeypatch):
        """Test environment overrides file."""
        path = tmp_path / "routes.yml"
        path.write_text(ROUTES_YAML)
        monkeypatch.setenv("ROADROUTE_LOG_LEVEL", "ERROR")

        config = load_config(str(path))
        assert config.log_level == "ERROR"
        assert len(config.routes) == 2

    def test_missing_file(self, tmp_path, caplog):
        """Test missing file falls back to defaults."""
        caplog.set_level(logging.WARNING, logger="roadroute_core.utils.config")
        config = load_config(str(tmp_path / "nope.yaml"))

        assert config.routes == []
        assert "Config file not found" in caplog.text

    def test_unknown_format(self, tmp_path, caplog):
        """Test unknown extension is ignored."""
        caplog.set_level(logging.WARNING, logger="roadroute_core.utils.config")
        path = tmp_path / "routes.toml"
        path.write_text("routes = []")

        config = load_config(str(path))
        assert config.routes == []
        assert "Unknown config format" in caplog.text


class TestHelpers:
    """Test helper functions."""

    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("roadroute_core")
        yield logger
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_normalize_methods(self):
        """Test method normalization."""
        assert normalize_methods(None) == ["*"]
        assert normalize_methods([]) == ["*"]
        assert normalize_methods("get") == ["GET"]
        assert normalize_methods(["get", "Post"]) == ["GET", "POST"]

    def test_setup_logging_json(self, package_logger):
        """Test JSON log lines."""
        stream = io.StringIO()
        setup_logging("debug", "json", stream=stream)

        logging.getLogger("roadroute_core.routing.router").debug("hello")

        entry = json.loads(stream.getvalue().splitlines()[0])
        assert entry["message"] == "hello"
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "roadroute_core.routing.router"

    def test_setup_logging_text(self, package_logger):
        """Test plain text log lines."""
        stream = io.StringIO()
        setup_logging("INFO", "text", stream=stream)
        setup_logging("INFO", "text", stream=stream)

        logging.getLogger("roadroute_core.test").info("routed")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert "INFO roadroute_core.test: routed" in lines[0]

    def test_setup_logging_numeric_level(self, package_logger):
        """Test int and digit-string levels."""
        assert setup_logging(10, stream=io.StringIO()).level == logging.DEBUG
        assert setup_logging("30", stream=io.StringIO()).level == logging.WARNING
