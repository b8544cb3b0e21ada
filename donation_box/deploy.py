"""Factories that create each contract with its default parameters."""

from .donations import TimedDonationBox, keep_in_custody, system_clock
from .nft import SimpleNFT
from .settings import (
    DONATION_WINDOW_SECONDS,
    NFT_MAX_SUPPLY,
    NFT_NAME,
    NFT_SYMBOL,
    TOKEN_DECIMALS,
    TOKEN_INITIAL_SUPPLY,
    TOKEN_NAME,
    TOKEN_SYMBOL,
)
from .tokens import SimpleToken


def deploy_donation_box(
    owner, duration=DONATION_WINDOW_SECONDS, payout=keep_in_custody, clock=system_clock
):
    """Open a timed donation box now, closing after `duration` seconds."""
    start = clock()
    return TimedDonationBox(owner, start, start + duration, payout=payout, clock=clock)


def deploy_token(owner):
    return SimpleToken(
        owner, TOKEN_NAME, TOKEN_SYMBOL, TOKEN_DECIMALS, TOKEN_INITIAL_SUPPLY
    )


def deploy_nft(owner):
    return SimpleNFT(owner, NFT_NAME, NFT_SYMBOL, NFT_MAX_SUPPLY)
