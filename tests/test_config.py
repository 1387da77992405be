"""Tests for settings."""

import pytest
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from pattern_demos.accounts import Account, SecureAccount
from pattern_demos.config import AppSettings, BankSettings, LibrarySettings, get_settings


class TestDefaults:
    """Tests that defaults match the demo constants."""

    def test_bank_defaults(self):
        """Test the bank settings defaults."""
        settings = BankSettings()
        assert settings.account_number == "123456"
        assert settings.withdrawal_limit == Decimal("500")
        assert settings.default_pin == "1234"
        assert settings.transaction_log_path == Path("transaction_log.txt")

    def test_library_defaults(self):
        """Test the library settings defaults."""
        settings = LibrarySettings()
        assert settings.default_state_file == "library_state.txt"
        assert settings.seed_sample_books is True

    def test_settings_is_cached(self):
        """Test get_settings returns the same container."""
        assert get_settings() is get_settings()


class TestOverrides:
    """Tests for environment overrides."""

    def test_withdrawal_limit_override(self, monkeypatch):
        """Test the secured account picks up a configured limit."""
        monkeypatch.setenv("BANK_WITHDRAWAL_LIMIT", "250")
        secure = SecureAccount(Account("123456", Decimal("1000")))
        assert secure.withdrawal_limit == Decimal("250")

    def test_pin_override(self, monkeypatch):
        """Test the secured account picks up a configured PIN."""
        monkeypatch.setenv("BANK_DEFAULT_PIN", "4321")
        secure = SecureAccount(Account("123456", Decimal("0")))
        assert secure.verify_pin("4321") is True

    def test_non_positive_limit_rejected(self, monkeypatch):
        """Test the withdrawal limit must be positive."""
        monkeypatch.setenv("BANK_WITHDRAWAL_LIMIT", "0")
        with pytest.raises(ValidationError):
            BankSettings()

    def test_log_level_normalized(self, monkeypatch):
        """Test log levels are upper-cased."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert AppSettings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        """Test unknown log levels fail validation."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            AppSettings()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
