"""Application configuration."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class PaymentApiConfig:
    """Payment API settings."""

    api_base: str = "https://api.stripe.com"
    connect_base: str = "https://connect.stripe.com"
    api_key: str = ""  # From the environment or the config-api command
    api_version: Optional[str] = None
    timeout: int = 80

    @classmethod
    def from_env(cls) -> "PaymentApiConfig":
        """Load settings from environment variables."""
        return cls(
            api_base=os.getenv("PAYMENT_API_BASE", "https://api.stripe.com"),
            connect_base=os.getenv("PAYMENT_CONNECT_BASE", "https://connect.stripe.com"),
            api_key=os.getenv("PAYMENT_API_KEY", ""),
            api_version=os.getenv("PAYMENT_API_VERSION") or None,
            timeout=int(os.getenv("PAYMENT_API_TIMEOUT", "80")),
        )


@dataclass
class AppConfig:
    """Application settings."""

    payment_api: PaymentApiConfig = None

    def __post_init__(self):
        """Fill in default sections."""
        if self.payment_api is None:
            self.payment_api = PaymentApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load settings from environment variables."""
        return cls(payment_api=PaymentApiConfig.from_env())


# Global instance
app_config = AppConfig()
