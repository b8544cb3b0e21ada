import logging

from .contract import check_uint256
from .errors import InsufficientFunds


class Accounts:
    """Native balances held outside any contract.

    Stands in for the chain's value transfer; `credit` has the signature a
    DonationBox expects of its `payout`.
    """

    def __init__(self, balances=None):
        self._balances = dict(balances or {})

    def balance_of(self, account):
        return self._balances.get(account, 0)

    def credit(self, account, amount):
        check_uint256(amount)
        self._balances[account] = self.balance_of(account) + amount
        logging.debug(f"Credited {amount} to {account}")

    def debit(self, account, amount):
        check_uint256(amount)
        balance = self.balance_of(account)
        if balance < amount:
            raise InsufficientFunds(account, balance, amount)
        self._balances[account] = balance - amount
        logging.debug(f"Debited {amount} from {account}")

    def send(self, sender, recipient, amount):
        self.debit(sender, amount)
        self.credit(recipient, amount)
