"""Request authentication for the OPay API.

OPay authenticates every call with two headers:

- ``MerchantId``: the merchant account id
- ``Authorization: Bearer <token>``

The token is the public key for endpoints that only identify the merchant
(checkout initialization, country/bank lists) and an HMAC-SHA512 signature of
the request payload for everything that moves or reveals money.
"""
from __future__ import annotations

import hashlib
import hmac
import json
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..core.endpoints import AuthScheme
from ..core.errors import SerializationError
from .settings import OPaySettings


def _json_default(value: Any) -> Any:
    # str() keeps every digit of a Decimal; float() would not
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dumps(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode request parameters as JSON: {e}") from e


def canonical_json(params: Optional[Mapping[str, Any]]) -> str:
    """Serialize ``params`` with sorted keys and no whitespace.

    The signature is computed over exactly these bytes, so the request body
    must be sent as returned here. ``Decimal`` values are sent as strings.
    """
    return _dumps(dict(params or {}))


def canonical_query(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Query pairs in sorted key order, each value in its canonical JSON form.

    Strings go out as-is; every other value (numbers, booleans, ``None``,
    nested mappings and lists) is written as the JSON text it has in
    ``canonical_json``, so the query carries what was signed.
    """
    out: List[Tuple[str, str]] = []
    for key, value in sorted(dict(params or {}).items()):
        if isinstance(value, str):
            out.append((key, value))
        elif isinstance(value, Decimal):
            out.append((key, str(value)))
        else:
            out.append((key, _dumps(value)))
    return out

def sign(payload: str, secret_key: str) -> str:
    return hmac.new(secret_key.encode("utf-8"), payload.encode("utf-8"), hashlib.sha512).hexdigest()


class RequestSigner:
    def __init__(self, settings: OPaySettings):
        self.settings = settings

    def bearer_token(self, scheme: AuthScheme, payload: str) -> str:
        if scheme == AuthScheme.PUBLIC_KEY:
            return self.settings.public_key
        return sign(payload, self.settings.secret_key)

    def headers(self, scheme: AuthScheme, payload: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.bearer_token(scheme, payload)}",
            "MerchantId": self.settings.merchant_id,
        }
