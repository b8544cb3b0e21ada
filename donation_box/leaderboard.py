from .types import NULL_DONOR, TopDonor


class TopDonors:
    """The three largest cumulative donors, highest first.

    Empty slots hold NULL_DONOR. A donor moving up is taken out of its slot
    and placed before the first slot holding strictly less, so among equal
    amounts whoever got there first stays ahead.
    """

    size = 3

    def __init__(self):
        self.slots = [NULL_DONOR] * self.size

    def __iter__(self):
        return iter(self.slots)

    def __len__(self):
        return self.size

    def __getitem__(self, index):
        return self.slots[index]

    def __contains__(self, account):
        return any(slot.account == account for slot in self.slots)

    def update(self, account, amount):
        for index, slot in enumerate(self.slots):
            if slot.account == account:
                del self.slots[index]
                self.slots.append(NULL_DONOR)
                break

        for index, slot in enumerate(self.slots):
            if slot.amount < amount:
                self.slots.insert(index, TopDonor(account, amount))
                del self.slots[self.size :]
                return

    def snapshot(self):
        return tuple(self.slots)
