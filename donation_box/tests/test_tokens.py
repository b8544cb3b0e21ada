import pytest

from donation_box.errors import (
    AuthorizationError,
    InsufficientAllowance,
    InsufficientBalance,
    InvalidParameter,
    InvalidReceiver,
    InvalidSender,
    InvalidSpender,
    NotOwner,
)
from donation_box.tokens import SimpleToken
from donation_box.types import MAX_UINT256, ZERO_ADDRESS, Approval, Transfer

from .conftest import ALICE, BOB, CAROL, ETHER, OWNER


@pytest.fixture
def token():
    return SimpleToken(OWNER, "Simple Token", "SIMPLE", 18, 1_000)


def test_initial_supply_goes_to_owner(token):
    assert token.name == "Simple Token"
    assert token.symbol == "SIMPLE"
    assert token.decimals == 18
    assert token.total_supply == 1_000 * ETHER
    assert token.balance_of(OWNER) == 1_000 * ETHER
    assert token.events_of(Transfer) == [Transfer(ZERO_ADDRESS, OWNER, 1_000 * ETHER)]


@pytest.mark.parametrize(
    "name, symbol, decimals",
    [("", "SIMPLE", 18), ("Simple Token", "", 18), ("Simple Token", "SIMPLE", 256)],
)
def test_bad_constructor_arguments(name, symbol, decimals):
    with pytest.raises(InvalidParameter):
        SimpleToken(OWNER, name, symbol, decimals, 1)


def test_transfer(token):
    assert token.transfer(OWNER, ALICE, 10 * ETHER) is True
    assert token.balance_of(OWNER) == 990 * ETHER
    assert token.balance_of(ALICE) == 10 * ETHER
    assert token.events[-1] == Transfer(OWNER, ALICE, 10 * ETHER)
    assert token.total_supply == 1_000 * ETHER


def test_transfer_more_than_balance(token):
    with pytest.raises(InsufficientBalance):
        token.transfer(ALICE, BOB, 1)
    assert token.balance_of(BOB) == 0


def test_transfer_to_zero_address(token):
    with pytest.raises(InvalidReceiver):
        token.transfer(OWNER, ZERO_ADDRESS, 1)


def test_approve_and_transfer_from(token):
    token.approve(OWNER, ALICE, 5 * ETHER)
    assert token.allowance(OWNER, ALICE) == 5 * ETHER
    assert token.events[-1] == Approval(OWNER, ALICE, 5 * ETHER)

    token.transfer_from(ALICE, OWNER, BOB, 2 * ETHER)
    assert token.allowance(OWNER, ALICE) == 3 * ETHER
    assert token.balance_of(BOB) == 2 * ETHER


def test_transfer_from_beyond_allowance(token):
    token.approve(OWNER, ALICE, ETHER)
    with pytest.raises(InsufficientAllowance) as excinfo:
        token.transfer_from(ALICE, OWNER, BOB, 2 * ETHER)
    assert isinstance(excinfo.value, AuthorizationError)
    assert token.allowance(OWNER, ALICE) == ETHER
    assert token.balance_of(BOB) == 0


def test_transfer_from_beyond_balance_keeps_allowance(token):
    token.approve(ALICE, BOB, 5 * ETHER)
    with pytest.raises(InsufficientBalance):
        token.transfer_from(BOB, ALICE, CAROL, ETHER)
    assert token.allowance(ALICE, BOB) == 5 * ETHER


def test_unlimited_allowance_is_not_spent(token):
    token.approve(OWNER, ALICE, MAX_UINT256)
    token.transfer_from(ALICE, OWNER, BOB, ETHER)
    assert token.allowance(OWNER, ALICE) == MAX_UINT256


def test_zero_addresses_rejected(token):
    with pytest.raises(InvalidSpender):
        token.approve(OWNER, ZERO_ADDRESS, 1)
    with pytest.raises(InvalidSender):
        token.transfer_from(ALICE, ZERO_ADDRESS, BOB, 0)
    with pytest.raises(InvalidReceiver):
        token.transfer_from(ALICE, OWNER, ZERO_ADDRESS, 0)


def test_owner_mints(token):
    token.mint(OWNER, ALICE, 7)
    assert token.balance_of(ALICE) == 7
    assert token.total_supply == 1_000 * ETHER + 7
    assert token.events[-1] == Transfer(ZERO_ADDRESS, ALICE, 7)


def test_stranger_cannot_mint(token):
    with pytest.raises(NotOwner, match="Not the owner"):
        token.mint(ALICE, ALICE, 7)
    assert token.total_supply == 1_000 * ETHER


def test_mint_cannot_overflow_supply(token):
    with pytest.raises(InvalidParameter):
        token.mint(OWNER, ALICE, MAX_UINT256)
    assert token.balance_of(ALICE) == 0


def test_renounced_token_cannot_mint(token):
    token.renounce_ownership(OWNER)
    for caller in (OWNER, ZERO_ADDRESS):
        with pytest.raises(NotOwner):
            token.mint(caller, ALICE, 1)
    assert token.total_supply == 1_000 * ETHER
