from typing import Dict, List, Optional, Union

from models.errors import CommandError, ErrorKind
from models.order import Order
from models.user import User
from views.order_view import format_orders, layout_buttons
from views import messages

class ConversationOrders:
    """Active orders for a single conversation, keyed by order name."""

    def __init__(self, keep_empty_items: bool = False):
        self.orders: Dict[str, Order] = {}
        self.keep_empty_items = keep_empty_items

    def add_order(self, owner: User, order_name: str) -> bool:
        """Adds an order, returning False if one with the same name already exists."""
        if order_name in self.orders:
            return False
        self.orders[order_name] = Order(name=order_name, owner=owner, keep_empty_items=self.keep_empty_items)
        return True

    def remove_order(self, requester: User, order_name: str) -> Union[Order, CommandError]:
        """
        Ends an order and returns it. Only the creator of the order may end it;
        anyone else gets an error naming the owner.
        """
        order = self.orders.get(order_name)
        if order is None:
            return CommandError(ErrorKind.ORDER_NOT_FOUND, messages.ORDER_NOT_FOUND.format(order_name=order_name))
        if order.owner != requester:
            return CommandError(
                ErrorKind.NOT_OWNER,
                messages.NOT_ORDER_OWNER.format(owner=order.owner.first_name, order_name=order_name)
            )
        return self.orders.pop(order_name)

    def add_item(self, order_name: str, user: User, item: str) -> Optional[Order]:
        """Adds an item to the named order, returning a snapshot of the updated order."""
        order = self.orders.get(order_name)
        if order is None:
            return None
        order.add_item(user, item)
        return order.copy()

    def remove_item(self, order_name: str, user: User) -> Optional[Order]:
        """
        Removes the user's item from the named order, returning a snapshot of the
        updated order. Returns None if the order does not exist or the user had not
        ordered anything.
        """
        order = self.orders.get(order_name)
        if order is None or order.remove_item(user) is None:
            return None
        return order.copy()

    def find_user_item(self, order_name: str, user: User) -> Optional[str]:
        order = self.orders.get(order_name)
        return order.find_user_item(user) if order else None

    def active_order_names(self) -> List[str]:
        return list(self.orders)

    def get(self, order_name: str) -> Optional[Order]:
        return self.orders.get(order_name)

    def inline_keyboard(self):
        """Buttons for every item of every active order, two per row."""
        show_order_name = len(self.orders) > 1
        buttons = [
            button
            for order in self.orders.values()
            for button in order.inline_buttons(show_order_name)
        ]
        return layout_buttons(buttons)

    def __contains__(self, order_name: str) -> bool:
        return order_name in self.orders

    def __len__(self) -> int:
        return len(self.orders)

    def __str__(self) -> str:
        return format_orders(list(self.orders.values()))
