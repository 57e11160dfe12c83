from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class AuthScheme(str, Enum):
    """How the Authorization header is filled for an endpoint."""

    # Bearer <public key>
    PUBLIC_KEY = "PUBLIC_KEY"
    # Bearer <hex HMAC-SHA512 of the canonical JSON, keyed with the secret key>
    SIGNATURE = "SIGNATURE"


@dataclass(frozen=True)
class EndpointSpec:
    name: str
    path: str
    method: HttpMethod = HttpMethod.POST
    auth: AuthScheme = AuthScheme.SIGNATURE


# Checkout (cashier)
CHECKOUT_INITIALIZE = EndpointSpec("checkout.initialize", "/cashier/initialize", auth=AuthScheme.PUBLIC_KEY)
CHECKOUT_STATUS = EndpointSpec("checkout.status", "/cashier/status")
# NOTE: the provider closes a checkout through the status path; keep them identical.
CHECKOUT_CLOSE = EndpointSpec("checkout.close", "/cashier/status")

# Transfer to OPay wallet
TRANSFER_TO_WALLET = EndpointSpec("transfer.to_wallet", "/transfer/toWallet")
TRANSFER_STATUS_TO_WALLET = EndpointSpec("transfer.status_to_wallet", "/transfer/status/toWallet")

# Transfer to bank account
TRANSFER_TO_BANK = EndpointSpec("transfer.to_bank", "/transfer/toBank")
TRANSFER_STATUS_TO_BANK = EndpointSpec("transfer.status_to_bank", "/transfer/status/toBank")
TRANSFER_SUPPORTED_COUNTRIES = EndpointSpec("transfer.countries", "/countries", auth=AuthScheme.PUBLIC_KEY)
TRANSFER_SUPPORTED_BANKS = EndpointSpec("transfer.banks", "/banks", auth=AuthScheme.PUBLIC_KEY)

# Inquiry
INQUIRY_BALANCE = EndpointSpec("inquiry.balance", "/balance")
INQUIRY_VALIDATE_USER = EndpointSpec("inquiry.validate_user", "/info/user", method=HttpMethod.GET)
INQUIRY_VALIDATE_MERCHANT = EndpointSpec("inquiry.validate_merchant", "/info/merchant", method=HttpMethod.GET)

# Verification
VERIFICATION_RESOLVE_ACCOUNT = EndpointSpec(
    "verification.resolve_account",
    "/verification/accountNumber/resolve",
)


def _build_registry(*specs: EndpointSpec) -> Mapping[str, EndpointSpec]:
    table: Dict[str, EndpointSpec] = {}
    for spec in specs:
        if spec.name in table:
            raise ValueError(f"duplicate endpoint name: {spec.name}")
        table[spec.name] = spec
    return MappingProxyType(table)


ENDPOINTS: Mapping[str, EndpointSpec] = _build_registry(
    CHECKOUT_INITIALIZE,
    CHECKOUT_STATUS,
    CHECKOUT_CLOSE,
    TRANSFER_TO_WALLET,
    TRANSFER_STATUS_TO_WALLET,
    TRANSFER_TO_BANK,
    TRANSFER_STATUS_TO_BANK,
    TRANSFER_SUPPORTED_COUNTRIES,
    TRANSFER_SUPPORTED_BANKS,
    INQUIRY_BALANCE,
    INQUIRY_VALIDATE_USER,
    INQUIRY_VALIDATE_MERCHANT,
    VERIFICATION_RESOLVE_ACCOUNT,
)


def get_endpoint(name: str) -> EndpointSpec:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name!r}. Known: {', '.join(sorted(ENDPOINTS))}") from None
