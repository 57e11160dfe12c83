from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..client.connection import ConnectionClient, Params
from ..core import endpoints as ep


@dataclass(frozen=True)
class WalletTransferEndpoints:
    transfer: ep.EndpointSpec = ep.TRANSFER_TO_WALLET
    status: ep.EndpointSpec = ep.TRANSFER_STATUS_TO_WALLET


@dataclass(frozen=True)
class BankTransferEndpoints:
    transfer: ep.EndpointSpec = ep.TRANSFER_TO_BANK
    status: ep.EndpointSpec = ep.TRANSFER_STATUS_TO_BANK
    countries: ep.EndpointSpec = ep.TRANSFER_SUPPORTED_COUNTRIES
    banks: ep.EndpointSpec = ep.TRANSFER_SUPPORTED_BANKS


class TransferToWallet:
    """Move funds from the merchant balance to an OPay user or merchant wallet."""

    def __init__(self, connection_client: ConnectionClient, *, endpoints: Optional[WalletTransferEndpoints] = None):
        self.connection_client = connection_client
        self.endpoints = endpoints or WalletTransferEndpoints()

    def transfer(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.transfer)

    def transfer_status(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.status)


class TransferToBank:
    """Pay out from the merchant balance to an external bank account.

    ``supported_countries`` and ``supported_banks`` list the valid
    ``country`` and ``bankCode`` values for ``transfer``.
    """

    def __init__(self, connection_client: ConnectionClient, *, endpoints: Optional[BankTransferEndpoints] = None):
        self.connection_client = connection_client
        self.endpoints = endpoints or BankTransferEndpoints()

    def transfer(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.transfer)

    def transfer_status(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.status)

    def supported_countries(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.countries)

    def supported_banks(self, params: Params = None) -> Dict[str, Any]:
        return self.connection_client.send(params, self.endpoints.banks)
