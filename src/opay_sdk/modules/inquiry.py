from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..client.connection import ConnectionClient, Params
from ..core import endpoints as ep


@dataclass(frozen=True)
class InquiryEndpoints:
    balance: ep.EndpointSpec = ep.INQUIRY_BALANCE
    validate_user: ep.EndpointSpec = ep.INQUIRY_VALIDATE_USER
    validate_merchant: ep.EndpointSpec = ep.INQUIRY_VALIDATE_MERCHANT


class Inquiry:
    """Read-only lookups: balances and user/merchant validation."""

    def __init__(self, connection_client: ConnectionClient, *, endpoints: Optional[InquiryEndpoints] = None):
        self.connection_client = connection_client
        self.endpoints = endpoints or InquiryEndpoints()

    def balance(self, params: Params = None) -> Dict[str, Any]:
        """Balances of all accounts held by the merchant."""
        return self.connection_client.send(params, self.endpoints.balance)

    def validate_user(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.validate_user)

    def validate_merchant(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.validate_merchant)
