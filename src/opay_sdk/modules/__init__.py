"""Feature modules.

Each module wraps one area of the OPay API and forwards every call to the
shared ``ConnectionClient`` with a fixed endpoint. Parameters are not
validated here; required fields are the caller's responsibility.
"""

from .cashout import Cashout, CashoutEndpoints
from .inquiry import Inquiry, InquiryEndpoints
from .transfer import BankTransferEndpoints, TransferToBank, TransferToWallet, WalletTransferEndpoints
from .verification import Verification, VerificationEndpoints

__all__ = [
    "Cashout",
    "CashoutEndpoints",
    "Inquiry",
    "InquiryEndpoints",
    "TransferToBank",
    "BankTransferEndpoints",
    "TransferToWallet",
    "WalletTransferEndpoints",
    "Verification",
    "VerificationEndpoints",
]
