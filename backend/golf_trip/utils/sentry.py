import logging
import os
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

logger = logging.getLogger(__name__)

SERVICE_NAME = "golf-trip-scoring"


def _parse_sample_rate(env_var: str, default: float = 0.0) -> float:
    """Read a sample rate in ``[0, 1]``; anything else falls back to ``default``."""
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    try:
        value = float(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid float (got %r); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default

    if not 0 <= value <= 1:
        logger.warning(
            "%s must be between 0 and 1 (got %s); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default

    return value


def _optional_env(env_var: str) -> Optional[str]:
    return (os.getenv(env_var) or "").strip() or None


def sentry_enabled() -> bool:
    return bool(_optional_env("SENTRY_DSN"))


def init_sentry() -> bool:
    """Initialize Sentry from the environment; return whether it was enabled."""
    dsn = _optional_env("SENTRY_DSN")
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    environment = _optional_env("SENTRY_ENVIRONMENT")
    sentry_sdk.init(
        dsn=dsn,
        integrations=[FastApiIntegration()],
        environment=environment,
        release=_optional_env("SENTRY_RELEASE"),
        traces_sample_rate=_parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE"),
        profiles_sample_rate=_parse_sample_rate("SENTRY_PROFILES_SAMPLE_RATE"),
    )
    sentry_sdk.set_tag("service", SERVICE_NAME)
    logger.info(
        "Initialized Sentry for %s%s",
        SERVICE_NAME,
        f" (environment={environment})" if environment else "",
    )
    return True
