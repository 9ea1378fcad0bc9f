from typing import Iterable, List, Mapping, Sequence, Set, Tuple
import views.messages as messages

Button = Tuple[str, str]

BUTTONS_PER_ROW = 2

def format_order(order_name: str, items: Mapping[str, Set]) -> str:
    """
    Renders an order as "<count> <item>: <names>" lines, items sorted by name and
    names sorted within each item. Items nobody selected are left out.
    """
    lines = []
    for item in sorted(items):
        users = items[item]
        if not users:
            continue
        names = sorted(user.first_name for user in users)
        lines.append(messages.ORDER_SUMMARY_LINE.format(count=len(users), item=item, names=", ".join(names)))

    return messages.ORDER_SUMMARY.format(
        order_name=order_name,
        lines="\n".join(lines) if lines else messages.NO_SELECTIONS
    )

def format_orders(orders: Sequence) -> str:
    if not orders:
        return messages.NO_ACTIVE_ORDERS_VIEW
    header = messages.CONVERSATION_HEADER.format(count=len(orders)) if len(orders) > 1 else ""
    return header + "\n\n".join(str(order) for order in orders)

def callback_payload(order_name: str, item: str) -> str:
    return f"{order_name} {item}"

def parse_callback_payload(payload: str):
    """Splits "<order name> <item>" on the first space. Returns None when either part is missing."""
    order_name, sep, item = payload.partition(" ")
    if not sep or not order_name or not item:
        return None
    return order_name, item

def build_item_buttons(order_name: str, items: Iterable[str], show_order_name: bool = False) -> List[Button]:
    buttons = []
    for item in sorted(items):
        label = f"{item} ({order_name})" if show_order_name else item
        buttons.append((label, callback_payload(order_name, item)))
    return buttons

def layout_buttons(buttons: Sequence[Button]) -> List[List[Button]]:
    return [list(buttons[i:i + BUTTONS_PER_ROW]) for i in range(0, len(buttons), BUTTONS_PER_ROW)]
