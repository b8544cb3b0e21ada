from collections import namedtuple


ZERO_ADDRESS = "0x" + "0" * 40
MAX_UINT256 = 2**256 - 1

Total = namedtuple("Total", ["raised", "target", "currency"])
TopDonor = namedtuple("TopDonor", ["account", "amount"])

NULL_DONOR = TopDonor(ZERO_ADDRESS, 0)

# Events
Donation = namedtuple("Donation", ["donor", "amount", "cumulative"])
Withdrawal = namedtuple("Withdrawal", ["owner", "amount"])
OwnershipTransferred = namedtuple(
    "OwnershipTransferred", ["previous_owner", "new_owner"]
)
Transfer = namedtuple("Transfer", ["source", "to", "value"])
Approval = namedtuple("Approval", ["owner", "spender", "value"])
ApprovalForAll = namedtuple("ApprovalForAll", ["owner", "operator", "approved"])
MetadataUpdate = namedtuple("MetadataUpdate", ["token_id"])

TimeRestriction = namedtuple("TimeRestriction", ["start", "end", "current"])
NFTTransfer = namedtuple("NFTTransfer", ["source", "to", "token_id"])
NFTApproval = namedtuple("NFTApproval", ["owner", "approved", "token_id"])
