from dataclasses import dataclass
from enum import Enum

class ErrorKind(Enum):
    INVALID_SYNTAX = "invalid_syntax"
    NO_ACTIVE_ORDER = "no_active_order"
    AMBIGUOUS_ORDER_NAME = "ambiguous_order_name"
    ORDER_NOT_FOUND = "order_not_found"
    DUPLICATE_ORDER_NAME = "duplicate_order_name"
    NOT_OWNER = "not_owner"
    UNRECOGNIZED_CALLBACK = "unrecognized_callback"
    UNKNOWN_COMMAND = "unknown_command"
    # cancelling when the user has nothing selected in the order
    NO_SELECTION = "no_selection"

@dataclass(frozen=True)
class CommandError:
    """A user-facing failure. Returned, never raised."""
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message
