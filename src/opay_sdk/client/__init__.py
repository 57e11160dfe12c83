from .connection import ConnectionClient, PreparedRequest
from .settings import LIVE_BASE_URL, SANDBOX_BASE_URL, OPaySettings

__all__ = ["ConnectionClient", "PreparedRequest", "OPaySettings", "LIVE_BASE_URL", "SANDBOX_BASE_URL"]
