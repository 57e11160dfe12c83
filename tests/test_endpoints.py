import pytest

from opay_sdk.core import endpoints as ep


def test_registry_paths():
    expected = {
        "checkout.initialize": "/cashier/initialize",
        "checkout.status": "/cashier/status",
        "checkout.close": "/cashier/status",
        "transfer.to_wallet": "/transfer/toWallet",
        "transfer.status_to_wallet": "/transfer/status/toWallet",
        "transfer.to_bank": "/transfer/toBank",
        "transfer.status_to_bank": "/transfer/status/toBank",
        "transfer.countries": "/countries",
        "transfer.banks": "/banks",
        "inquiry.balance": "/balance",
        "inquiry.validate_user": "/info/user",
        "inquiry.validate_merchant": "/info/merchant",
        "verification.resolve_account": "/verification/accountNumber/resolve",
    }
    assert {name: spec.path for name, spec in ep.ENDPOINTS.items()} == expected


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ep.ENDPOINTS["checkout.initialize"] = ep.CHECKOUT_STATUS  # type: ignore[index]


def test_endpoint_spec_is_frozen():
    with pytest.raises(AttributeError):
        ep.CHECKOUT_STATUS.path = "/elsewhere"  # type: ignore[misc]


def test_get_endpoint_unknown_name():
    with pytest.raises(KeyError, match="Unknown endpoint"):
        ep.get_endpoint("checkout.refund")


def test_duplicate_names_rejected():
    with pytest.raises(ValueError):
        ep._build_registry(ep.CHECKOUT_STATUS, ep.CHECKOUT_STATUS)
