import logging
import time

from .contract import Ownable, check_integer, check_uint256
from .errors import (
    InvalidAmount,
    InvalidSender,
    InvalidWindow,
    NothingToWithdraw,
    WindowClosed,
    WindowNotOpen,
)
from .leaderboard import TopDonors
from .types import ZERO_ADDRESS, Donation, TimeRestriction, Withdrawal


def system_clock():
    return int(time.time())


def keep_in_custody(owner, amount):
    logging.info(f"No payout configured; {amount} wei stays with {owner}")


class DonationBox(Ownable):
    """Accepts donations at any time and lets the owner withdraw them.

    `payout(owner, amount)` is the value-transfer primitive used by
    `withdraw`; if it raises, the withdrawal is abandoned and the balance is
    left as it was.
    """

    def __init__(self, owner, payout=keep_in_custody, clock=system_clock):
        super().__init__(owner)
        self.payout = payout
        self.clock = clock

        self._donations = {}
        self._donors = []
        self._total_donations = 0
        self._balance = 0
        self.top_donors = TopDonors()

    def check_open(self, current_time):
        pass

    def is_donation_allowed(self):
        return True

    def donate(self, sender, amount):
        if sender == ZERO_ADDRESS:
            raise InvalidSender(sender)
        check_integer(amount)
        if amount <= 0:
            raise InvalidAmount()
        check_uint256(self._total_donations + amount, "total donations")
        self.check_open(self.clock())

        if sender not in self._donations:
            self._donations[sender] = 0
            self._donors.append(sender)
        self._donations[sender] += amount
        cumulative = self._donations[sender]
        self._total_donations += amount
        self._balance += amount
        self.top_donors.update(sender, cumulative)

        logging.debug(f"{sender} donated {amount}, {cumulative} in all")
        self.emit(Donation(sender, amount, cumulative))
        return cumulative

    def withdraw(self, sender):
        self.only_owner(sender)
        amount = self._balance
        if not amount:
            raise NothingToWithdraw()

        self.payout(self.owner, amount)
        self._balance = 0

        logging.info(f"{self.owner} withdrew {amount}")
        self.emit(Withdrawal(self.owner, amount))
        return amount

    def get_donation(self, account):
        return self._donations.get(account, 0)

    @property
    def total_donations(self):
        return self._total_donations

    @property
    def donor_count(self):
        return len(self._donors)

    def get_all_donors(self):
        return list(self._donors)

    @property
    def balance(self):
        return self._balance

    def get_top3_donors(self):
        return self.top_donors.snapshot()


class TimeWindow:
    """A closed interval of unix timestamps, fixed at creation."""

    def __init__(self, start, end):
        if not start < end:
            raise InvalidWindow(start, end)
        self.start = start
        self.end = end

    def __repr__(self):
        return f"TimeWindow({self.start}, {self.end})"

    def is_open(self, current_time):
        return self.start <= current_time <= self.end

    def check_open(self, current_time):
        if current_time < self.start:
            raise WindowNotOpen(self.start, current_time)
        if current_time > self.end:
            raise WindowClosed(self.end, current_time)


class TimedDonationBox(DonationBox):
    """A DonationBox that only accepts donations between `start` and `end`."""

    def __init__(self, owner, start, end, payout=keep_in_custody, clock=system_clock):
        self.window = TimeWindow(start, end)
        super().__init__(owner, payout=payout, clock=clock)

    @property
    def donation_start_time(self):
        return self.window.start

    @property
    def donation_end_time(self):
        return self.window.end

    def check_open(self, current_time):
        self.window.check_open(current_time)

    def is_donation_allowed(self):
        return self.window.is_open(self.clock())

    def time_restriction_info(self):
        return TimeRestriction(self.window.start, self.window.end, self.clock())
