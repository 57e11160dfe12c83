"""Error taxonomy for the OPay SDK.

- ``TransportError``: the HTTP round trip could not complete.
- ``SerializationError``: request parameters cannot be encoded as JSON.
- ``ParseError``: a response arrived but its body is not a JSON object.
- ``ProviderError``: OPay answered with a business failure code. The client
  returns such responses as-is unless asked to raise.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

SUCCESS_CODE = "00000"


class OPayError(RuntimeError):
    """Base class for every error raised by this package."""


class TransportError(OPayError):
    def __init__(self, message: str, *, url: str = ""):
        super().__init__(message)
        self.url = url


class SerializationError(OPayError):
    """A parameter value has no JSON form (e.g. a set or an arbitrary object)."""


class ParseError(OPayError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProviderError(OPayError):
    def __init__(self, code: str, message: str, response: Mapping[str, Any]):
        super().__init__(f"OPay error {code}: {message}")
        self.code = code
        self.message = message
        self.response: Dict[str, Any] = dict(response)


def is_successful(response: Mapping[str, Any]) -> bool:
    return str(response.get("code", "")) == SUCCESS_CODE


def raise_for_provider_error(response: Mapping[str, Any]) -> Mapping[str, Any]:
    """Raise ``ProviderError`` unless ``response`` carries the success code.

    Returns the response untouched so it can be used inline.
    """
    if is_successful(response):
        return response
    code = str(response.get("code", ""))
    message = str(response.get("message", "") or "")
    raise ProviderError(code, message, response)
