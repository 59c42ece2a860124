import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


_TRUTHY = {"1", "true", "yes", "on"}


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception as e:
            # no secrets.toml outside `streamlit run`
            logger.debug("Streamlit secrets unavailable for %s: %s", name, e)
    return os.environ.get(name, default)


class Settings:
    app_name = "TeleMedCart"

    @property
    def token_secret(self) -> str:
        return get_secret("TELEMEDCART_TOKEN_SECRET") or "telemedcart-dev-secret-change-in-production"

    @property
    def token_ttl_hours(self) -> int:
        raw = get_secret("TELEMEDCART_TOKEN_TTL_HOURS", "24")
        try:
            return max(int(raw), 1)
        except (TypeError, ValueError):
            logger.warning("Invalid TELEMEDCART_TOKEN_TTL_HOURS=%r, using 24", raw)
            return 24

    @property
    def seed_demo_data(self) -> bool:
        return (get_secret("TELEMEDCART_SEED_DEMO", "true") or "").strip().lower() in _TRUTHY

    @property
    def video_domain(self) -> str:
        return get_secret("TELEMEDCART_VIDEO_DOMAIN", "meet.jit.si") or "meet.jit.si"

    @property
    def log_level(self) -> str:
        return (get_secret("LOG_LEVEL", "INFO") or "INFO").upper()
