"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal, InvalidOperation

from pydantic import field_validator
from pydantic_settings import BaseSettings


class BankConfig(BaseSettings):
    """Minibank configuration"""

    # Business rules configuration
    overdraft_fee: str = "25.00"  # Flat fee per overdrawing check
    amount_precision: int = 2
    enforce_unique_account_ids: bool = True

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    enable_action_logging: bool = True

    @field_validator("overdraft_fee")
    @classmethod
    def check_overdraft_fee(cls, value: str) -> str:
        try:
            fee = Decimal(value)
        except InvalidOperation:
            raise ValueError(f"overdraft_fee is not a decimal: {value!r}") from None
        if not fee.is_finite() or fee < 0:
            raise ValueError("overdraft_fee must be a non-negative amount")
        return value

    @field_validator("amount_precision")
    @classmethod
    def check_precision(cls, value: int) -> int:
        if value < 0:
            raise ValueError("amount_precision must not be negative")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log_level: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    @property
    def overdraft_fee_amount(self) -> Decimal:
        """Overdraft fee as a Decimal"""
        return Decimal(self.overdraft_fee)

    class Config:
        env_prefix = "MINIBANK_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankConfig()


def get_config() -> BankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankConfig:
    """Reload configuration from environment"""
    global config
    config = BankConfig()
    return config
