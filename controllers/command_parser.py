from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from models.errors import CommandError, ErrorKind
from views import messages

DEFAULT_BOT_MENTION = "@food_ordering_bot"
COMMAND_PREFIX = "/"

@dataclass(frozen=True)
class StartOrder:
    order_name: str

@dataclass(frozen=True)
class EndOrder:
    order_name: str

@dataclass(frozen=True)
class AddItem:
    order_name: str
    item: str

@dataclass(frozen=True)
class RemoveItem:
    order_name: str

@dataclass(frozen=True)
class ViewOrders:
    pass

@dataclass(frozen=True)
class Help:
    pass

Command = Union[StartOrder, EndOrder, AddItem, RemoveItem, ViewOrders, Help]
ParseResult = Union[Command, CommandError]

def normalize_message(message: str, bot_mention: str = DEFAULT_BOT_MENTION) -> List[str]:
    """Lowercases the message, drops bot mentions and splits it into tokens."""
    normalized = message.strip().lower()
    if bot_mention:
        normalized = normalized.replace(bot_mention.lower(), " ")
    return normalized.split()

def join_order_name(args: Sequence[str]) -> str:
    return "-".join(args)

def parse_command(message: str, active_orders: Sequence[str], bot_mention: str = DEFAULT_BOT_MENTION) -> ParseResult:
    """
    Turns chat text into a Command, or a CommandError describing what is wrong.

    `active_orders` holds the names of the orders currently open in the
    conversation. It is used to fill in the order name when only one order is
    open, and to check order names that were given explicitly.
    """
    if not message.strip().startswith(COMMAND_PREFIX):
        return CommandError(ErrorKind.UNKNOWN_COMMAND, messages.USE_HELP)

    tokens = normalize_message(message, bot_mention)
    if not tokens:
        return CommandError(ErrorKind.UNKNOWN_COMMAND, messages.UNKNOWN_COMMAND)
    command, args = tokens[0], tokens[1:]

    if command == "/help":
        return Help()
    if command in ("/view", "/view_orders"):
        return ViewOrders()
    if command in ("/start", "/start_order"):
        return parse_start(args)
    if command in ("/end", "/end_order"):
        return parse_end(args, active_orders)
    if command == "/order":
        return parse_order(args, active_orders)
    if command == "/cancel":
        return parse_cancel(args, active_orders)
    return CommandError(ErrorKind.UNKNOWN_COMMAND, messages.UNKNOWN_COMMAND)

def parse_start(args: Sequence[str]) -> ParseResult:
    if not args:
        return CommandError(ErrorKind.INVALID_SYNTAX, messages.START_ORDER_MISSING_NAME)
    return StartOrder(join_order_name(args))

def parse_end(args: Sequence[str], active_orders: Sequence[str]) -> ParseResult:
    order_name = resolve_order_name(args, active_orders, messages.END_ORDER_AMBIGUOUS)
    if isinstance(order_name, CommandError):
        return order_name
    return EndOrder(order_name)

def parse_cancel(args: Sequence[str], active_orders: Sequence[str]) -> ParseResult:
    order_name = resolve_order_name(args, active_orders, messages.CANCEL_AMBIGUOUS)
    if isinstance(order_name, CommandError):
        return order_name
    return RemoveItem(order_name)

def parse_order(args: Sequence[str], active_orders: Sequence[str]) -> ParseResult:
    if not active_orders:
        return CommandError(ErrorKind.NO_ACTIVE_ORDER, messages.NO_ACTIVE_ORDERS)

    if len(active_orders) == 1:
        if not args:
            return CommandError(ErrorKind.INVALID_SYNTAX, messages.ORDER_ITEM_MISSING)
        if args[0] == active_orders[0]:
            # the order name was given explicitly
            if len(args) == 1:
                return CommandError(ErrorKind.INVALID_SYNTAX, messages.ORDER_ITEM_MISSING)
            return AddItem(args[0], " ".join(args[1:]))
        return AddItem(active_orders[0], " ".join(args))

    # multiple active orders, so the first argument has to name one of them
    if not args:
        return CommandError(ErrorKind.AMBIGUOUS_ORDER_NAME, messages.ORDER_NAME_AND_ITEM_MISSING)
    if len(args) == 1:
        kind = ErrorKind.INVALID_SYNTAX if args[0] in active_orders else ErrorKind.AMBIGUOUS_ORDER_NAME
        return CommandError(kind, messages.ORDER_NAME_AND_ITEM_MISSING)
    if args[0] not in active_orders:
        return CommandError(
            ErrorKind.ORDER_NOT_FOUND,
            messages.ORDER_NOT_FOUND_FOR_ITEM.format(order_name=args[0])
        )
    return AddItem(args[0], " ".join(args[1:]))

def resolve_order_name(args: Sequence[str], active_orders: Sequence[str], ambiguous_message: str) -> Union[str, CommandError]:
    """
    Works out which order a command refers to. An omitted name is inferred when
    exactly one order is active; a given name must match an active order.
    """
    if not active_orders:
        return CommandError(ErrorKind.NO_ACTIVE_ORDER, messages.NO_ACTIVE_ORDERS)

    order_name = infer_order_name(args, active_orders)
    if order_name is not None:
        return order_name
    if not args:
        return CommandError(ErrorKind.AMBIGUOUS_ORDER_NAME, ambiguous_message)
    return CommandError(
        ErrorKind.ORDER_NOT_FOUND,
        messages.ORDER_NOT_FOUND.format(order_name=join_order_name(args))
    )

def infer_order_name(args: Sequence[str], active_orders: Sequence[str]) -> Optional[str]:
    if not args:
        return active_orders[0] if len(active_orders) == 1 else None
    order_name = join_order_name(args)
    return order_name if order_name in active_orders else None
