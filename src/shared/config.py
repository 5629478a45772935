"""Runtime settings shared by every bounded context.

Values are read from environment variables once and cached. Tests that
need different values set the environment and call ``reset_settings()``.
"""

import os
from dataclasses import dataclass, field

DEFAULT_SERVICES = ("identity", "cart", "ordering", "catalogue")


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if not value:
        return default
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    jwt_secret: str = "devsecret"
    jwt_algorithm: str = "HS256"
    jwt_expires_in_seconds: int = 24 * 60 * 60
    cookie_name: str = "token"
    cookie_secure: bool = True

    cart_service_url: str = "http://localhost:8000"
    product_service_url: str = "http://localhost:8000"
    http_timeout_seconds: float = 5.0

    redis_url: str | None = None

    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    mail_from: str = "Shopfront <no-reply@shopfront.local>"

    services: tuple[str, ...] = field(default=DEFAULT_SERVICES)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            jwt_secret=os.getenv("JWT_SECRET", "devsecret"),
            jwt_expires_in_seconds=int(os.getenv("JWT_EXPIRES_IN_SECONDS", str(24 * 60 * 60))),
            cookie_secure=_as_bool(os.getenv("COOKIE_SECURE"), default=True),
            cart_service_url=os.getenv("CART_SERVICE_URL", "http://localhost:8000").rstrip("/"),
            product_service_url=os.getenv("PRODUCT_SERVICE_URL", "http://localhost:8000").rstrip("/"),
            http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "5")),
            redis_url=os.getenv("REDIS_URL") or None,
            smtp_host=os.getenv("SMTP_HOST") or None,
            smtp_port=int(os.getenv("SMTP_PORT", "587")),
            smtp_user=os.getenv("SMTP_USER") or None,
            smtp_password=os.getenv("SMTP_PASSWORD") or None,
            mail_from=os.getenv("MAIL_FROM", "Shopfront <no-reply@shopfront.local>"),
            services=_as_list(os.getenv("SHOPFRONT_SERVICES"), DEFAULT_SERVICES),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
