"""
Test suite for environment-based configuration
"""

import pytest

from core_money import config as config_module
from core_money.config import CoreMoneyConfig, get_config, reload_config


class TestCoreMoneyConfig:
    """Test CoreMoneyConfig defaults and environment overrides"""

    def teardown_method(self):
        """Restore the global configuration"""
        reload_config()

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "INCLUDE_CRYPTO",
                     "CURRENCIES_FILE", "CURRENCIES_SET_NAME"):
            monkeypatch.delenv(f"CORE_MONEY_{name}", raising=False)
        settings = CoreMoneyConfig()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_file is None
        assert settings.include_crypto is True
        assert settings.currencies_file is None
        assert settings.currencies_set_name == "custom"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CORE_MONEY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("core_money_include_crypto", "false")
        settings = CoreMoneyConfig()
        assert settings.log_level == "DEBUG"
        assert settings.include_crypto is False

    def test_reload_replaces_global(self, monkeypatch):
        monkeypatch.setenv("CORE_MONEY_CURRENCIES_SET_NAME", "loyalty")
        reloaded = reload_config()
        assert reloaded.currencies_set_name == "loyalty"
        assert get_config() is reloaded
        assert config_module.config is reloaded

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("CORE_MONEY_INCLUDE_CRYPTO", "sometimes")
        with pytest.raises(ValueError):
            CoreMoneyConfig()
