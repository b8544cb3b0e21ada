from donation_box.deploy import deploy_donation_box, deploy_nft, deploy_token
from donation_box.settings import DONATION_WINDOW_SECONDS, NFT_MAX_SUPPLY

from .conftest import ETHER, OWNER


def test_donation_box_opens_now(clock):
    box = deploy_donation_box(OWNER, clock=clock)
    assert box.owner == OWNER
    assert box.donation_start_time == clock.now
    assert box.donation_end_time == clock.now + DONATION_WINDOW_SECONDS
    assert box.is_donation_allowed()


def test_custom_duration(clock):
    box = deploy_donation_box(OWNER, duration=60, clock=clock)
    clock.now += 61
    assert not box.is_donation_allowed()


def test_token_defaults():
    token = deploy_token(OWNER)
    assert token.symbol == "SIMPLE"
    assert token.balance_of(OWNER) == 1_000_000 * ETHER


def test_nft_defaults():
    nft = deploy_nft(OWNER)
    assert nft.symbol == "SNFT"
    assert nft.remaining_supply == NFT_MAX_SUPPLY
