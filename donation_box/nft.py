import logging

from .contract import Ownable, check_uint256
from .errors import (
    IncorrectOwner,
    InsufficientApproval,
    InvalidApprover,
    InvalidOperator,
    InvalidOwner,
    InvalidParameter,
    InvalidReceiver,
    NonexistentToken,
    SupplyExhausted,
)
from .types import (
    ZERO_ADDRESS,
    ApprovalForAll,
    MetadataUpdate,
    NFTApproval,
    NFTTransfer,
)


INTERFACE_IDS = {
    "ERC165": 0x01FFC9A7,
    "ERC721": 0x80AC58CD,
    "ERC721Metadata": 0x5B5E139F,
    "ERC4906": 0x49064906,
}


class SimpleNFT(Ownable):
    """A capped collection of non-fungible tokens, each with its own metadata URI.

    Token ids are handed out in order starting from 0, and only the owner of
    the collection can mint.
    """

    def __init__(self, owner, name, symbol, max_supply):
        if not name:
            raise InvalidParameter("NFT name cannot be empty")
        if not symbol:
            raise InvalidParameter("NFT symbol cannot be empty")
        check_uint256(max_supply, "max supply")
        if max_supply == 0:
            raise InvalidParameter("Max supply must be greater than 0")

        super().__init__(owner)
        self.name = name
        self.symbol = symbol
        self.max_supply = max_supply

        self._next_token_id = 0
        self._owners = {}
        self._balances = {}
        self._token_uris = {}
        self._token_approvals = {}
        self._operator_approvals = set()

    @property
    def current_supply(self):
        return self._next_token_id

    @property
    def remaining_supply(self):
        return self.max_supply - self._next_token_id

    def supports_interface(self, interface_id):
        if isinstance(interface_id, str):
            interface_id = int(interface_id, 16)
        return interface_id in INTERFACE_IDS.values()

    def mint_nft(self, sender, to, token_uri):
        self.only_owner(sender)
        if to == ZERO_ADDRESS:
            raise InvalidReceiver(to, "Cannot mint to zero address")
        if not token_uri:
            raise InvalidParameter("Token URI cannot be empty")
        if self._next_token_id >= self.max_supply:
            raise SupplyExhausted(self.max_supply)

        token_id = self._next_token_id
        self._next_token_id += 1
        self._owners[token_id] = to
        self._balances[to] = self._balance(to) + 1
        self._token_uris[token_id] = token_uri

        logging.debug(f"{self.symbol}: minted #{token_id} to {to}")
        self.emit(NFTTransfer(ZERO_ADDRESS, to, token_id))
        self.emit(MetadataUpdate(token_id))
        return token_id

    def _require_owned(self, token_id):
        try:
            return self._owners[token_id]
        except KeyError:
            raise NonexistentToken(token_id) from None

    def owner_of(self, token_id):
        return self._require_owned(token_id)

    def _balance(self, account):
        return self._balances.get(account, 0)

    def balance_of(self, account):
        if account == ZERO_ADDRESS:
            raise InvalidOwner(account)
        return self._balance(account)

    def token_uri(self, token_id):
        self._require_owned(token_id)
        return self._token_uris[token_id]

    def get_approved(self, token_id):
        self._require_owned(token_id)
        return self._token_approvals.get(token_id, ZERO_ADDRESS)

    def is_approved_for_all(self, owner, operator):
        return (owner, operator) in self._operator_approvals

    def approve(self, sender, to, token_id):
        owner = self._require_owned(token_id)
        if sender != owner and not self.is_approved_for_all(owner, sender):
            raise InvalidApprover(sender)

        self._token_approvals[token_id] = to
        self.emit(NFTApproval(owner, to, token_id))

    def set_approval_for_all(self, sender, operator, approved):
        if operator == ZERO_ADDRESS:
            raise InvalidOperator(operator)

        if approved:
            self._operator_approvals.add((sender, operator))
        else:
            self._operator_approvals.discard((sender, operator))
        self.emit(ApprovalForAll(sender, operator, bool(approved)))

    def _is_authorized(self, owner, spender, token_id):
        return (
            spender == owner
            or self.is_approved_for_all(owner, spender)
            or self._token_approvals.get(token_id) == spender
        )

    def transfer_from(self, sender, source, to, token_id):
        if to == ZERO_ADDRESS:
            raise InvalidReceiver(to)
        owner = self._require_owned(token_id)
        if not self._is_authorized(owner, sender, token_id):
            raise InsufficientApproval(sender, token_id)
        if source != owner:
            raise IncorrectOwner(source, token_id, owner)

        self._token_approvals.pop(token_id, None)
        self._balances[owner] -= 1
        self._balances[to] = self._balance(to) + 1
        self._owners[token_id] = to

        logging.debug(f"{self.symbol}: {owner} sent #{token_id} to {to}")
        self.emit(NFTTransfer(owner, to, token_id))
