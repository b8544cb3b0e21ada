import logging

from .contract import Ownable, check_uint256
from .errors import (
    InsufficientAllowance,
    InsufficientBalance,
    InvalidParameter,
    InvalidReceiver,
    InvalidSender,
    InvalidSpender,
    NotOwner,
)
from .types import MAX_UINT256, ZERO_ADDRESS, Approval, Transfer


class SimpleToken(Ownable):
    """A fungible token with an owner-only mint.

    `initial_supply` is given in whole tokens and minted to `owner`.
    An allowance of MAX_UINT256 is treated as unlimited.
    """

    unauthorized = NotOwner

    def __init__(self, owner, name, symbol, decimals=18, initial_supply=0):
        if not name:
            raise InvalidParameter("Token name cannot be empty")
        if not symbol:
            raise InvalidParameter("Token symbol cannot be empty")
        check_uint256(decimals, "decimals")
        if decimals > 255:
            raise InvalidParameter(f"decimals out of range: {decimals}")
        check_uint256(initial_supply, "initial supply")
        check_uint256(initial_supply * 10**decimals, "initial supply")

        super().__init__(owner)
        self.name = name
        self.symbol = symbol
        self.decimals = decimals

        self._balances = {}
        self._allowances = {}
        self._total_supply = 0

        self._mint(owner, initial_supply * 10**decimals)

    @property
    def total_supply(self):
        return self._total_supply

    def balance_of(self, account):
        return self._balances.get(account, 0)

    def allowance(self, owner, spender):
        return self._allowances.get((owner, spender), 0)

    def transfer(self, sender, to, value):
        check_uint256(value)
        if to == ZERO_ADDRESS:
            raise InvalidReceiver(to)
        self._check_balance(sender, value)
        self._move(sender, to, value)
        return True

    def approve(self, sender, spender, value):
        check_uint256(value)
        if spender == ZERO_ADDRESS:
            raise InvalidSpender(spender)
        self._allowances[(sender, spender)] = value
        self.emit(Approval(sender, spender, value))
        return True

    def transfer_from(self, spender, source, to, value):
        check_uint256(value)
        if source == ZERO_ADDRESS:
            raise InvalidSender(source)
        if to == ZERO_ADDRESS:
            raise InvalidReceiver(to)
        allowance = self.allowance(source, spender)
        if allowance < value:
            raise InsufficientAllowance(spender, allowance, value)
        self._check_balance(source, value)

        if allowance != MAX_UINT256:
            self._allowances[(source, spender)] = allowance - value
        self._move(source, to, value)
        return True

    def mint(self, sender, to, value):
        self.only_owner(sender)
        check_uint256(value)
        if to == ZERO_ADDRESS:
            raise InvalidReceiver(to)
        check_uint256(self._total_supply + value, "total supply")
        self._mint(to, value)

    def _check_balance(self, account, value):
        balance = self.balance_of(account)
        if balance < value:
            raise InsufficientBalance(account, balance, value)

    def _move(self, source, to, value):
        self._balances[source] = self.balance_of(source) - value
        self._balances[to] = self.balance_of(to) + value
        logging.debug(f"{self.symbol}: {source} sent {value} to {to}")
        self.emit(Transfer(source, to, value))

    def _mint(self, to, value):
        self._balances[to] = self.balance_of(to) + value
        self._total_supply += value
        logging.debug(f"{self.symbol}: minted {value} to {to}")
        self.emit(Transfer(ZERO_ADDRESS, to, value))
