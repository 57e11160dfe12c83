from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..client.connection import ConnectionClient, Params
from ..core import endpoints as ep


@dataclass(frozen=True)
class CashoutEndpoints:
    """Endpoint paths (overridable)."""

    initialize: ep.EndpointSpec = ep.CHECKOUT_INITIALIZE
    status: ep.EndpointSpec = ep.CHECKOUT_STATUS
    close: ep.EndpointSpec = ep.CHECKOUT_CLOSE


class Cashout:
    """OPay hosted checkout (cashier).

    A checkout has no local representation: it is identified by whatever the
    caller puts in the parameters (usually ``reference``) and looked up again
    through ``transaction_status``.
    """

    def __init__(self, connection_client: ConnectionClient, *, endpoints: Optional[CashoutEndpoints] = None):
        self.connection_client = connection_client
        self.endpoints = endpoints or CashoutEndpoints()

    def initialize_transaction(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.initialize)

    def transaction_status(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.status)

    def close_transaction(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.close)
