from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..client.connection import ConnectionClient, Params
from ..core import endpoints as ep


@dataclass(frozen=True)
class VerificationEndpoints:
    resolve_account: ep.EndpointSpec = ep.VERIFICATION_RESOLVE_ACCOUNT


class Verification:
    def __init__(self, connection_client: ConnectionClient, *, endpoints: Optional[VerificationEndpoints] = None):
        self.connection_client = connection_client
        self.endpoints = endpoints or VerificationEndpoints()

    def resolve_account_name(self, params: Params = None) -> Dict[str, Any]:
        """Verify a bank account number and return the name it is registered to."""
        return self.connection_client.send(params, self.endpoints.resolve_account)
