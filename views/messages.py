# Help
HELP_TEXT = (
    "/start <order name> - starts an order. For example, /start waffles.\n"
    "/view - shows active orders.\n\n"
    "The following commands will ask for the order name, if there are multiple active orders.\n\n"
    "/order [order name] <item> - adds an item to an order, or replaces the previously chosen one.\n"
    "/cancel [order name] - removes your previously selected item from an order.\n"
    "/end [order name] - stops an order. Only the person who started it may end it.\n\n"
    "Tap a button below an order to pick that item, or tap your own item again to cancel it."
)

USE_HELP = "Use /help for supported commands."
UNKNOWN_COMMAND = "Use /help for a list of recognized commands."

# Command syntax
START_ORDER_MISSING_NAME = "Specify the name of the order. For example, /start waffles."
NO_ACTIVE_ORDERS = "There are no active orders. Start one by using /start <order name>."
ORDER_NOT_FOUND = "Order {order_name} not found."
END_ORDER_AMBIGUOUS = (
    "Since there are multiple active orders, specify the name of the order. "
    "For example, /end waffles."
)
CANCEL_AMBIGUOUS = (
    "As there are multiple active orders, specify the name of the order. "
    "For example, /cancel waffles."
)
ORDER_ITEM_MISSING = "Specify the name of the item you wish to order. For example, /order chocolate."
ORDER_NAME_AND_ITEM_MISSING = (
    "Specify the order name and item you wish to order. For example, /order waffles chocolate."
)
ORDER_NOT_FOUND_FOR_ITEM = (
    "Order {order_name} not found. "
    "Specify the order name and item you wish to order. For example, /order waffles chocolate."
)

# Order lifecycle
ORDER_STARTED = (
    "Order started for {order_name}.\n"
    "Use /order <item> to order, /view to view active orders and /end when done."
)
ORDER_ALREADY_IN_PROGRESS = (
    "There is already an order for {order_name} in progress. "
    "Use /order {order_name} <item> to add an item to it."
)
NOT_ORDER_OWNER = "Only {owner} may end their order for {order_name}."

ORDER_UPDATED = "{order}\n\nUse /order <item> to update your order and /end when done."
ORDER_ITEM_CANCELLED = (
    "{order}\n\nCancelled your order of {item}. "
    "Use /order <item> to order something else."
)
NOTHING_TO_CANCEL = (
    "You have not ordered anything for {order_name}. "
    "Use /order <item> to do so."
)

# Rendering
ORDER_SUMMARY = "Orders for {order_name}:\n\n{lines}"
ORDER_SUMMARY_LINE = "{count} {item}: {names}"
NO_SELECTIONS = "No selections."
CONVERSATION_HEADER = "There are {count} orders.\n"
NO_ACTIVE_ORDERS_VIEW = "There are no active orders."

# Button taps
UNRECOGNIZED_CALLBACK = "This button is no longer recognized. Use /view to see active orders."
TAP_CANCELLED = "Cancelled order of {item} for {order_name}."
TAP_UPDATED = "Updated order for {order_name} to {item}."

# Status
STATUS_ACTIVE = "There are now active orders."
STATUS_IDLE = "No active orders."
