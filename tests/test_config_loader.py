"""Tests for configuration loading"""

import pytest
from pydantic import ValidationError

from session_client.core.config_loader import ConfigLoader, load_config
from session_client.models.config import ClientConfig, LoggingConfig, RetryConfig


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML configuration file and return its path"""
    def write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


class TestConfigModels:
    """Test configuration model validation"""

    def test_defaults(self):
        """Test default values"""
        config = ClientConfig()

        assert config.base_url == "http://localhost:4096"
        assert config.timeout == 30.0
        assert config.headers == {}
        assert config.retry.max_retries == 3
        assert config.logging.level == "INFO"

    def test_invalid_base_url(self):
        """Test base URL scheme is required"""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="localhost:4096")

    def test_non_positive_timeout(self):
        """Test timeout must be positive"""
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)

    def test_negative_retries(self):
        """Test max_retries lower bound"""
        with pytest.raises(ValidationError):
            RetryConfig(max_retries=-1)

    def test_invalid_status_code(self):
        """Test retry status codes must be HTTP codes"""
        with pytest.raises(ValidationError):
            RetryConfig(retry_on_status=[500, 999])

    def test_log_level_normalized(self):
        """Test log level is upper-cased and validated"""
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")


class TestConfigLoader:
    """Test YAML loading and environment handling"""

    def test_load_full_file(self, config_file):
        """Test every section is parsed"""
        path = config_file(
            "base_url: http://api.test/\n"
            "timeout: 12.5\n"
            "headers:\n"
            "  X-Client: tests\n"
            "retry:\n"
            "  max_retries: 1\n"
            "  initial_delay: 0.5\n"
            "  retry_on_status: [503]\n"
            "logging:\n"
            "  level: warning\n"
        )

        config = ConfigLoader(path).load()

        assert config.base_url == "http://api.test"
        assert config.timeout == 12.5
        assert config.headers == {"X-Client": "tests"}
        assert config.retry.max_retries == 1
        assert config.retry.initial_delay == 0.5
        assert config.retry.retry_on_status == [503]
        assert config.logging.level == "WARNING"

    def test_env_var_substitution(self, config_file, monkeypatch):
        """Test ${VAR} references are replaced"""
        monkeypatch.setenv("TEST_SESSION_TOKEN", "secret")
        path = config_file('headers:\n  Authorization: "Bearer ${TEST_SESSION_TOKEN}"\n')

        config = ConfigLoader(path).load()

        assert config.headers["Authorization"] == "Bearer secret"

    def test_missing_env_var(self, config_file, monkeypatch):
        """Test unset variable is reported"""
        monkeypatch.delenv("TEST_SESSION_MISSING", raising=False)
        path = config_file('base_url: "${TEST_SESSION_MISSING}"\n')

        with pytest.raises(ValueError, match="TEST_SESSION_MISSING"):
            ConfigLoader(path).load()

    def test_env_overrides(self, config_file, monkeypatch):
        """Test SESSION_API_* variables win over the file"""
        monkeypatch.setenv("SESSION_API_BASE_URL", "https://override.test")
        monkeypatch.setenv("SESSION_API_TIMEOUT", "3")
        monkeypatch.setenv("SESSION_API_MAX_RETRIES", "0")
        monkeypatch.setenv("SESSION_API_LOG_LEVEL", "error")
        path = config_file("base_url: http://api.test\ntimeout: 10\nretry:\n  max_retries: 4\n")

        config = ConfigLoader(path).load()

        assert config.base_url == "https://override.test"
        assert config.timeout == 3.0
        assert config.retry.max_retries == 0
        assert config.logging.level == "ERROR"

    def test_missing_file(self, tmp_path):
        """Test missing configuration file"""
        with pytest.raises(FileNotFoundError):
            ConfigLoader(str(tmp_path / "absent.yaml")).load()

    def test_empty_file(self, config_file):
        """Test empty configuration file"""
        with pytest.raises(ValueError, match="empty"):
            ConfigLoader(config_file("")).load()

    def test_invalid_yaml(self, config_file):
        """Test YAML syntax errors"""
        with pytest.raises(ValueError, match="Failed to parse"):
            ConfigLoader(config_file("base_url: [unclosed\n")).load()

    def test_non_mapping_yaml(self, config_file):
        """Test top-level YAML must be a mapping"""
        with pytest.raises(ValueError, match="mapping"):
            ConfigLoader(config_file("- a\n- b\n")).load()


class TestLoadConfig:
    """Test the convenience loader"""

    def test_explicit_path(self, config_file):
        """Test explicit path is loaded"""
        config = load_config(config_file("timeout: 7\n"))
        assert config.timeout == 7.0

    def test_path_from_environment(self, config_file, monkeypatch):
        """Test SESSION_API_CONFIG_PATH is honoured"""
        monkeypatch.setenv("SESSION_API_CONFIG_PATH", config_file("timeout: 9\n"))
        assert load_config().timeout == 9.0

    def test_missing_environment_path_raises(self, tmp_path, monkeypatch):
        """Test a named but absent file is an error"""
        monkeypatch.setenv("SESSION_API_CONFIG_PATH", str(tmp_path / "absent.yaml"))
        with pytest.raises(FileNotFoundError):
            load_config()

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        """Test fallback to defaults when no default file exists"""
        monkeypatch.chdir(tmp_path)

        config = load_config()

        assert config == ClientConfig()

    def test_default_file_used(self, tmp_path, monkeypatch):
        """Test config/config.yaml in the working directory"""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("base_url: http://cwd.test\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().base_url == "http://cwd.test"
