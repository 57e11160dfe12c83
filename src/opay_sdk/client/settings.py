from __future__ import annotations

from dataclasses import dataclass
import math
import os

SANDBOX_BASE_URL = "https://sandbox-cashierapi.opayweb.com/api/v3"
LIVE_BASE_URL = "https://cashierapi.opayweb.com/api/v3"

_BASE_URLS = {
    "sandbox": SANDBOX_BASE_URL,
    "live": LIVE_BASE_URL,
}


def _mask(value: str) -> str:
    if len(value) <= 8:
        return "***"
    return f"{value[:4]}***{value[-4:]}"


@dataclass(frozen=True)
class OPaySettings:
    """Runtime configuration for the OPay API.

    Values are loaded from environment variables to avoid committing secrets.
    """

    merchant_id: str
    public_key: str
    secret_key: str
    base_url: str = SANDBOX_BASE_URL
    timeout_sec: float = 30.0

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if not math.isfinite(self.timeout_sec) or self.timeout_sec <= 0:
            raise ValueError(f"timeout_sec must be a positive finite number, got {self.timeout_sec!r}")

    def __repr__(self) -> str:
        return (
            f"OPaySettings(merchant_id={self.merchant_id!r}, public_key={_mask(self.public_key)!r}, "
            f"secret_key={_mask(self.secret_key)!r}, base_url={self.base_url!r}, timeout_sec={self.timeout_sec})"
        )

    @staticmethod
    def base_url_for(env: str) -> str:
        try:
            return _BASE_URLS[env.strip().lower()]
        except KeyError:
            raise RuntimeError(f"Unknown OPay environment: {env!r} (expected 'sandbox' or 'live')") from None

    @staticmethod
    def from_env(prefix: str = "OPAY_") -> "OPaySettings":
        def req(name: str) -> str:
            v = os.getenv(prefix + name)
            if not v:
                raise RuntimeError(f"Missing env var: {prefix}{name}")
            return v

        # An explicit base URL wins over the sandbox/live switch.
        base_url = os.getenv(prefix + "BASE_URL") or OPaySettings.base_url_for(os.getenv(prefix + "ENV", "sandbox"))

        timeout_raw = os.getenv(prefix + "TIMEOUT_SEC", "")
        try:
            timeout_sec = float(timeout_raw) if timeout_raw else 30.0
        except ValueError:
            raise RuntimeError(f"Invalid {prefix}TIMEOUT_SEC: {timeout_raw!r}") from None
        if not math.isfinite(timeout_sec) or timeout_sec <= 0:
            raise RuntimeError(f"Invalid {prefix}TIMEOUT_SEC: {timeout_raw!r} (must be a positive number)")

        return OPaySettings(
            merchant_id=req("MERCHANT_ID"),
            public_key=req("PUBLIC_KEY"),
            secret_key=req("SECRET_KEY"),
            base_url=base_url,
            timeout_sec=timeout_sec,
        )
