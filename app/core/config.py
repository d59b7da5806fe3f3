import os

_TRUTHY = ("1", "true", "yes")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

SERVICE_NAME = "Target Proxy"
SERVICE_VERSION = "1.0.0"

def resolve_log_level(value: str) -> str:
    """Upper-cased logging level name, INFO when the name is unknown."""
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else "INFO"

class Settings:
    # Outbound target
    TARGET_BASE_URL: str = os.getenv("TARGET_BASE_URL", "https://bbc.co.uk/")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "target-proxy/1.0")

    # Public routes
    TARGET_ROUTE_PREFIX: str = os.getenv("TARGET_ROUTE_PREFIX", "/Target")
    TARGET_ROUTE_ALIASES: str = os.getenv(
        "TARGET_ROUTE_ALIASES", "GET /GetData,POST /GetData,GET /GetData2"
    )

    # When enabled the public route answers with the upstream status code
    # instead of always answering 200.
    PROPAGATE_UPSTREAM_STATUS: bool = os.getenv("PROPAGATE_UPSTREAM_STATUS", "0").lower() in _TRUTHY

    # Hosting
    APP_ENV: str = os.getenv("APP_ENV", "production")
    HTTPS_REDIRECT: bool = os.getenv("HTTPS_REDIRECT", "0").lower() in _TRUTHY
    LOG_LEVEL: str = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() == "development"

settings = Settings()
