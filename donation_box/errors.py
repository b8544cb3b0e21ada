class ContractError(Exception):
    """Base error for every rejected contract operation.

    A raised ContractError means the operation had no effect: no state was
    changed and no event was emitted.
    """


class ValidationError(ContractError):
    """An argument was malformed or out of range."""


class AuthorizationError(ContractError):
    """The caller is not allowed to perform the operation."""


class StateError(ContractError):
    """The contract's current state does not allow the operation."""


# Validation


class InvalidAmount(ValidationError):
    def __init__(self, reason="Donation amount must be greater than 0"):
        super().__init__(reason)


class InvalidWindow(ValidationError):
    def __init__(self, start, end):
        super().__init__("Start time must be before end time")
        self.start = start
        self.end = end


class InvalidParameter(ValidationError):
    pass


class _InvalidAddress(ValidationError):
    label = "address"

    def __init__(self, address, reason=None):
        super().__init__(reason or f"Invalid {self.label}: {address}")
        self.address = address


class InvalidReceiver(_InvalidAddress):
    label = "receiver"


class InvalidSender(_InvalidAddress):
    label = "sender"


class InvalidSpender(_InvalidAddress):
    label = "spender"


class InvalidOwner(_InvalidAddress):
    label = "owner"


class InvalidOperator(_InvalidAddress):
    label = "operator"


class InvalidApprover(_InvalidAddress):
    label = "approver"


# Authorization


class Unauthorized(AuthorizationError):
    def __init__(self, account):
        super().__init__(f"Unauthorized account: {account}")
        self.account = account


class NotOwner(AuthorizationError):
    def __init__(self, account):
        super().__init__("Not the owner")
        self.account = account


class InsufficientAllowance(AuthorizationError):
    def __init__(self, spender, allowance, needed):
        super().__init__(
            f"Insufficient allowance for {spender}: has {allowance}, needs {needed}"
        )
        self.spender = spender
        self.allowance = allowance
        self.needed = needed


class InsufficientApproval(AuthorizationError):
    def __init__(self, operator, token_id):
        super().__init__(f"{operator} is not approved for token {token_id}")
        self.operator = operator
        self.token_id = token_id


# State


class NothingToWithdraw(StateError):
    def __init__(self):
        super().__init__("No funds to withdraw")


class WindowNotOpen(StateError):
    def __init__(self, start, current):
        super().__init__("Donation period has not started yet")
        self.start = start
        self.current = current


class WindowClosed(StateError):
    def __init__(self, end, current):
        super().__init__("Donation period has ended")
        self.end = end
        self.current = current


class SupplyExhausted(StateError):
    def __init__(self, max_supply):
        super().__init__("Maximum supply reached")
        self.max_supply = max_supply


class NonexistentToken(StateError):
    def __init__(self, token_id):
        super().__init__(f"Nonexistent token: {token_id}")
        self.token_id = token_id


class IncorrectOwner(StateError):
    def __init__(self, sender, token_id, owner):
        super().__init__(f"Token {token_id} is owned by {owner}, not {sender}")
        self.sender = sender
        self.token_id = token_id
        self.owner = owner


class InsufficientBalance(StateError):
    def __init__(self, sender, balance, needed):
        super().__init__(
            f"Insufficient balance for {sender}: has {balance}, needs {needed}"
        )
        self.sender = sender
        self.balance = balance
        self.needed = needed


class InsufficientFunds(InsufficientBalance):
    pass
