"""OPay REST API client.

This package keeps endpoint paths overridable per module because OPay has
revised them between API versions.

Covered areas:
- Hosted checkout (initialize / status / close)
- Transfers to OPay wallets and to bank accounts
- Balance inquiry and user/merchant validation
- Bank account name resolution

Typical wiring::

    from opay_sdk import OPay, OPaySettings

    opay = OPay(OPaySettings.from_env())
    opay.cashout.initialize_transaction({"reference": "TXN123", "amount": "500"})
"""
from __future__ import annotations

from typing import Optional

from .client import ConnectionClient, OPaySettings, PreparedRequest
from .core.endpoints import ENDPOINTS, AuthScheme, EndpointSpec, HttpMethod, get_endpoint
from .core.errors import (
    OPayError,
    ParseError,
    ProviderError,
    SerializationError,
    TransportError,
    is_successful,
    raise_for_provider_error,
)
from .modules import Cashout, Inquiry, TransferToBank, TransferToWallet, Verification


class OPay:
    """All feature modules wired to one ``ConnectionClient``."""

    def __init__(
        self,
        settings: Optional[OPaySettings] = None,
        *,
        client: Optional[ConnectionClient] = None,
        raise_on_provider_error: bool = False,
    ):
        if client is None:
            if settings is None:
                raise ValueError("OPay needs either settings or a ConnectionClient")
            client = ConnectionClient(settings, raise_on_provider_error=raise_on_provider_error)
        elif settings is not None or raise_on_provider_error:
            raise ValueError("Pass settings/raise_on_provider_error or a ConnectionClient, not both")
        self.client = client
        self.cashout = Cashout(client)
        self.wallet_transfer = TransferToWallet(client)
        self.bank_transfer = TransferToBank(client)
        self.inquiry = Inquiry(client)
        self.verification = Verification(client)


__all__ = [
    "OPay",
    "OPaySettings",
    "ConnectionClient",
    "PreparedRequest",
    "ENDPOINTS",
    "AuthScheme",
    "EndpointSpec",
    "HttpMethod",
    "get_endpoint",
    "OPayError",
    "TransportError",
    "ParseError",
    "ProviderError",
    "SerializationError",
    "is_successful",
    "raise_for_provider_error",
    "Cashout",
    "TransferToWallet",
    "TransferToBank",
    "Inquiry",
    "Verification",
]
