from decimal import Decimal, InvalidOperation

from .types import ZERO_ADDRESS


WEI_PER_ETHER = 10**18


def parse_ether(value, decimals=18):
    """Turn a decimal string such as "1.5" into an integer number of base units."""
    try:
        amount = Decimal(str(value)) * 10**decimals
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}") from None
    if amount != amount.to_integral_value():
        raise ValueError(f"{value} has more than {decimals} decimal places")
    return int(amount)


def to_ether(amount, decimals=18):
    return (Decimal(amount) / 10**decimals).normalize()


def format_ether(amount, symbol="Ξ"):
    return f"{symbol}{to_ether(amount):f}"


def short_address(account):
    if account == ZERO_ADDRESS or not account:
        return ""
    if account.startswith("0x") and len(account) > 12:
        return f"{account[:6]}…{account[-4:]}"
    return account


def format_donation(donation, symbol="Ξ"):
    message = f"{short_address(donation.donor)} donated {format_ether(donation.amount, symbol)}"
    if donation.cumulative != donation.amount:
        message += f", {format_ether(donation.cumulative, symbol)} in all"

    return message
