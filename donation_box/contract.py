import logging

from .errors import InvalidOwner, InvalidParameter, Unauthorized
from .types import MAX_UINT256, OwnershipTransferred, ZERO_ADDRESS


def check_integer(value, name="amount"):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(f"{name} must be an integer, not {value!r}")
    return value


def check_uint256(value, name="amount"):
    check_integer(value, name)
    if not 0 <= value <= MAX_UINT256:
        raise InvalidParameter(f"{name} out of range: {value}")
    return value


class Contract:
    """Base class holding a contract's append-only event log.

    Operations validate everything before touching state, so by the time
    `emit` is called the operation has committed.
    """

    def __init__(self):
        self.events = []
        self._listeners = []

    def subscribe(self, listener):
        self._listeners.append(listener)

    def unsubscribe(self, listener):
        self._listeners.remove(listener)

    def emit(self, event):
        self.events.append(event)
        logging.debug(f"{type(self).__name__} emitted {event}")
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logging.exception(
                    f"Listener {listener!r} failed on {event}; "
                    "the operation has already committed"
                )

    def events_of(self, event_type):
        return [event for event in self.events if isinstance(event, event_type)]


class Ownable(Contract):
    unauthorized = Unauthorized

    def __init__(self, owner):
        super().__init__()
        if owner == ZERO_ADDRESS:
            raise InvalidOwner(owner)
        self._owner = owner
        self.emit(OwnershipTransferred(ZERO_ADDRESS, owner))

    @property
    def owner(self):
        return self._owner

    def only_owner(self, caller):
        # nobody owns a renounced contract
        if caller == ZERO_ADDRESS or caller != self._owner:
            raise self.unauthorized(caller)

    def transfer_ownership(self, sender, new_owner):
        self.only_owner(sender)
        if new_owner == ZERO_ADDRESS:
            raise InvalidOwner(new_owner)
        self._set_owner(new_owner)

    def renounce_ownership(self, sender):
        self.only_owner(sender)
        self._set_owner(ZERO_ADDRESS)

    def _set_owner(self, new_owner):
        previous_owner, self._owner = self._owner, new_owner
        logging.info(f"Ownership of {type(self).__name__} moved to {new_owner}")
        self.emit(OwnershipTransferred(previous_owner, new_owner))
