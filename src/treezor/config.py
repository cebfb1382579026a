"""Client configuration via environment variables."""

from pydantic_settings import BaseSettings

SANDBOX_BASE_URL = "https://sandbox.treezor.com/v1/index.php/"
PRODUCTION_BASE_URL = "https://treezor.com/v1/index.php/"


class TreezorSettings(BaseSettings):
    # Environment (set TREEZOR_PRODUCTION=1 to talk to the live platform)
    production: bool = False
    base_url: str | None = None

    # HTTP
    timeout: float = 30.0
    user_agent: str = "treezor-client"

    # Webhooks
    webhook_secret: str = ""
    webhook_path: str = "/webhooks/treezor"

    # Logging
    log_level: str = "info"
    json_logs: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TREEZOR_",
    }

    @property
    def effective_base_url(self) -> str:
        """Return the explicit base URL if set, else sandbox or production."""
        if self.base_url:
            return self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        if self.production:
            return PRODUCTION_BASE_URL
        return SANDBOX_BASE_URL


settings = TreezorSettings()
