import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, List, Optional, Tuple

from controllers.command_parser import (
    DEFAULT_BOT_MENTION, AddItem, Command, EndOrder, Help, RemoveItem, StartOrder, ViewOrders, parse_command
)
from models.conversation_orders import ConversationOrders
from models.errors import CommandError, ErrorKind
from models.order import Order
from models.user import User
from views import messages
from views.order_view import Button, layout_buttons, parse_callback_payload

ChatId = Hashable

@dataclass
class CommandResult:
    """The outcome of a command: the reply text and, optionally, rows of (label, callback data) buttons."""
    success: bool
    message: str
    buttons: Optional[List[List[Button]]] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, message: str, buttons: Optional[List[List[Button]]] = None) -> "CommandResult":
        return cls(success=True, message=message, buttons=buttons or None)

    @classmethod
    def failure(cls, message: str, error: Optional[ErrorKind] = None) -> "CommandResult":
        return cls(success=False, message=message, error=error)

    @classmethod
    def from_error(cls, error: CommandError) -> "CommandResult":
        return cls.failure(error.message, error.kind)

class TapDecision(Enum):
    CANCEL = "cancel"
    SELECT = "select"

def decide_tap(current_item: Optional[str], tapped_item: str) -> TapDecision:
    """Tapping the item you already hold cancels it; tapping any other item selects it."""
    if current_item is not None and current_item == tapped_item:
        return TapDecision.CANCEL
    return TapDecision.SELECT

def order_keyboard(order: Order) -> List[List[Button]]:
    return layout_buttons(order.inline_buttons())

class FoodOrderingBot:
    """
    Routes commands to the orders of each conversation.

    Holds one ConversationOrders per chat. A chat only has an entry while it has
    at least one active order.
    """

    def __init__(self, keep_empty_items: bool = False, bot_mention: str = DEFAULT_BOT_MENTION):
        self.conversations: Dict[ChatId, ConversationOrders] = {}
        self.keep_empty_items = keep_empty_items
        self.bot_mention = bot_mention

    def get_active_order_names(self, chat: ChatId) -> List[str]:
        conversation = self.conversations.get(chat)
        return conversation.active_order_names() if conversation else []

    def has_active_orders(self) -> bool:
        return any(len(conversation) > 0 for conversation in self.conversations.values())

    def active_order_count(self) -> int:
        return sum(len(conversation) for conversation in self.conversations.values())

    def start_order(self, chat: ChatId, user: User, order_name: str) -> CommandResult:
        conversation = self.conversations.get(chat)
        if conversation is None:
            conversation = ConversationOrders(keep_empty_items=self.keep_empty_items)
            self.conversations[chat] = conversation

        if not conversation.add_order(user, order_name):
            return CommandResult.failure(
                messages.ORDER_ALREADY_IN_PROGRESS.format(order_name=order_name),
                ErrorKind.DUPLICATE_ORDER_NAME
            )
        logging.info(f"[STARTED] Order {order_name} in chat {chat} by user {user.id}")
        return CommandResult.ok(messages.ORDER_STARTED.format(order_name=order_name))

    def end_order(self, chat: ChatId, user: User, order_name: str) -> CommandResult:
        conversation = self.conversations.get(chat)
        if conversation is None:
            return CommandResult.failure(
                messages.ORDER_NOT_FOUND.format(order_name=order_name), ErrorKind.ORDER_NOT_FOUND
            )

        removed = conversation.remove_order(user, order_name)
        if isinstance(removed, CommandError):
            return CommandResult.from_error(removed)

        if not len(conversation):
            del self.conversations[chat]
        logging.info(f"[ENDED] Order {order_name} in chat {chat}")
        return CommandResult.ok(str(removed))

    def add_item(self, chat: ChatId, user: User, order_name: str, item: str) -> CommandResult:
        conversation = self.conversations.get(chat)
        order = conversation.add_item(order_name, user, item) if conversation else None
        if order is None:
            return CommandResult.failure(
                messages.ORDER_NOT_FOUND.format(order_name=order_name), ErrorKind.ORDER_NOT_FOUND
            )
        return CommandResult.ok(messages.ORDER_UPDATED.format(order=order), order_keyboard(order))

    def remove_item(self, chat: ChatId, user: User, order_name: str) -> CommandResult:
        conversation = self.conversations.get(chat)
        if conversation is None or order_name not in conversation:
            return CommandResult.failure(
                messages.ORDER_NOT_FOUND.format(order_name=order_name), ErrorKind.ORDER_NOT_FOUND
            )

        item = conversation.find_user_item(order_name, user)
        order = conversation.remove_item(order_name, user)
        if order is None:
            return CommandResult.failure(
                messages.NOTHING_TO_CANCEL.format(order_name=order_name), ErrorKind.NO_SELECTION
            )
        return CommandResult.ok(
            messages.ORDER_ITEM_CANCELLED.format(order=order, item=item), order_keyboard(order)
        )

    def view_orders(self, chat: ChatId) -> CommandResult:
        conversation = self.conversations.get(chat)
        if not conversation:
            return CommandResult.failure(messages.NO_ACTIVE_ORDERS, ErrorKind.NO_ACTIVE_ORDER)
        return CommandResult.ok(str(conversation), conversation.inline_keyboard())

    def help(self) -> CommandResult:
        return CommandResult.ok(messages.HELP_TEXT)

    def execute(self, chat: ChatId, user: User, command: Command) -> CommandResult:
        if isinstance(command, StartOrder):
            return self.start_order(chat, user, command.order_name)
        if isinstance(command, EndOrder):
            return self.end_order(chat, user, command.order_name)
        if isinstance(command, AddItem):
            return self.add_item(chat, user, command.order_name, command.item)
        if isinstance(command, RemoveItem):
            return self.remove_item(chat, user, command.order_name)
        if isinstance(command, ViewOrders):
            return self.view_orders(chat)
        if isinstance(command, Help):
            return self.help()
        raise TypeError(f"Unsupported command: {command!r}")

    def handle_message(self, chat: ChatId, user: User, text: str) -> CommandResult:
        """Parses a chat message against the chat's active orders and runs it."""
        command = parse_command(text, self.get_active_order_names(chat), self.bot_mention)
        if isinstance(command, CommandError):
            return CommandResult.from_error(command)
        return self.execute(chat, user, command)

    def handle_callback_query(self, chat: ChatId, user: User, payload: str, is_view: bool) -> Tuple[CommandResult, str]:
        """
        Handles a tap on an item button, whose payload is "<order name> <item>".

        Tapping the item the user already has cancels it, anything else selects it.
        When the tapped message is the output of /view, the result re-renders every
        active order so the edited message keeps showing all of them.

        Returns the result to edit the message with and a short acknowledgement.
        """
        parsed = parse_callback_payload(payload)
        if parsed is None:
            logging.warning(f"Unrecognized callback payload {payload!r} in chat {chat}")
            result = CommandResult.failure(messages.UNRECOGNIZED_CALLBACK, ErrorKind.UNRECOGNIZED_CALLBACK)
            return result, result.message
        order_name, item = parsed

        conversation = self.conversations.get(chat)
        current_item = conversation.find_user_item(order_name, user) if conversation else None
        decision = decide_tap(current_item, item)

        if decision is TapDecision.CANCEL:
            result = self.remove_item(chat, user, order_name)
            ack = messages.TAP_CANCELLED.format(item=item, order_name=order_name)
        else:
            result = self.add_item(chat, user, order_name, item)
            ack = messages.TAP_UPDATED.format(order_name=order_name, item=item)

        if not result.success:
            return result, result.message
        if is_view:
            result = self.view_orders(chat)
        return result, ack
