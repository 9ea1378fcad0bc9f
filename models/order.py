from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from models.user import User
from views.order_view import format_order, build_item_buttons

@dataclass
class Order:
    """
    A named order within a conversation.

    `items` maps an item name to the users who selected it. A user appears in
    at most one of those sets at any time.
    """
    name: str
    owner: User
    items: Dict[str, Set[User]] = field(default_factory=dict)
    keep_empty_items: bool = False

    def add_item(self, user: User, item: str) -> bool:
        """
        Selects `item` for `user`, replacing any earlier selection.
        Returns whether an earlier selection was replaced.
        """
        overrode_previous = self.remove_item(user) is not None
        self.items.setdefault(item, set()).add(user)
        return overrode_previous

    def remove_item(self, user: User) -> Optional[str]:
        """Removes the user's selection, returning the item it was for, if any."""
        for item, users in self.items.items():
            if user in users:
                users.discard(user)
                break
        else:
            return None

        if not users and not self.keep_empty_items:
            del self.items[item]
        return item

    def find_user_item(self, user: User) -> Optional[str]:
        for item, users in self.items.items():
            if user in users:
                return item
        return None

    def copy(self) -> "Order":
        return Order(
            name=self.name,
            owner=self.owner,
            items={item: set(users) for item, users in self.items.items()},
            keep_empty_items=self.keep_empty_items,
        )

    def inline_buttons(self, show_order_name: bool = False) -> List[Tuple[str, str]]:
        return build_item_buttons(self.name, self.items, show_order_name)

    def __str__(self) -> str:
        return format_order(self.name, self.items)
