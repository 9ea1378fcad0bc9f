import pytest

from controllers.command_parser import (
    AddItem, EndOrder, Help, RemoveItem, StartOrder, ViewOrders, parse_command
)
from models.errors import CommandError, ErrorKind

NO_ORDERS = []
WAFFLES = ["waffles"]
PIZZA = ["pizza"]
WAFFLES_AND_PIZZA = ["waffles", "pizza"]


def error_kind(result):
    assert isinstance(result, CommandError), f"expected an error, got {result!r}"
    return result.kind


def test_text_without_command_prefix_asks_for_help():
    result = parse_command("hi", WAFFLES)
    assert error_kind(result) == ErrorKind.UNKNOWN_COMMAND
    assert result.message == "Use /help for supported commands."


@pytest.mark.parametrize("text", ["/invalid_command", "/", "/ordering waffles"])
def test_unrecognized_command(text):
    result = parse_command(text, NO_ORDERS)
    assert error_kind(result) == ErrorKind.UNKNOWN_COMMAND
    assert result.message == "Use /help for a list of recognized commands."


def test_help_and_view():
    assert parse_command("/help", NO_ORDERS) == Help()
    assert parse_command("/view", WAFFLES) == ViewOrders()
    assert parse_command("/view_orders", WAFFLES) == ViewOrders()


@pytest.mark.parametrize("text", [
    "/start waffles",
    "/Start WAFFLES ",
    "   /start    waffles",
    "/start waffles @food_ordering_bot",
    "/start@food_ordering_bot waffles",
    "/START@Food_Ordering_Bot Waffles",
    "/start_order waffles",
])
def test_start_normalization(text):
    assert parse_command(text, NO_ORDERS) == StartOrder("waffles")


def test_custom_bot_mention_is_stripped():
    assert parse_command("/start@lunch_bot pizza", NO_ORDERS, bot_mention="@lunch_bot") == StartOrder("pizza")


def test_start_requires_a_name():
    result = parse_command("/start ", NO_ORDERS)
    assert error_kind(result) == ErrorKind.INVALID_SYNTAX
    assert result.message == "Specify the name of the order. For example, /start waffles."


def test_start_joins_multi_word_names_with_hyphens():
    assert parse_command("/start ice cream", NO_ORDERS) == StartOrder("ice-cream")
    assert parse_command("/start ice-cream", NO_ORDERS) == StartOrder("ice-cream")


def test_end_without_active_orders():
    result = parse_command("/end waffles", NO_ORDERS)
    assert error_kind(result) == ErrorKind.NO_ACTIVE_ORDER
    assert result.message == "There are no active orders. Start one by using /start <order name>."


def test_end_with_one_active_order():
    assert parse_command("/end waffles", WAFFLES) == EndOrder("waffles")
    assert parse_command("/end", WAFFLES) == EndOrder("waffles")
    assert parse_command("/End_order Waffles ", WAFFLES) == EndOrder("waffles")


def test_end_with_unknown_name_does_not_fall_back_to_the_only_order():
    result = parse_command("/end ice-cream", WAFFLES)
    assert error_kind(result) == ErrorKind.ORDER_NOT_FOUND
    assert result.message == "Order ice-cream not found."

    result = parse_command("/end Waffles", PIZZA)
    assert result.message == "Order waffles not found."


def test_end_joins_multi_word_names():
    assert parse_command("/end ice cream", ["waffles", "ice-cream"]) == EndOrder("ice-cream")


def test_end_with_multiple_active_orders():
    result = parse_command("/end", WAFFLES_AND_PIZZA)
    assert error_kind(result) == ErrorKind.AMBIGUOUS_ORDER_NAME
    assert "/end waffles" in result.message

    assert parse_command("/end waffles", WAFFLES_AND_PIZZA) == EndOrder("waffles")
    assert parse_command("/end pizza", WAFFLES_AND_PIZZA) == EndOrder("pizza")


@pytest.mark.parametrize("text", ["/order", "/order chocolate", "/order waffles chocolate"])
def test_order_without_active_orders(text):
    assert error_kind(parse_command(text, NO_ORDERS)) == ErrorKind.NO_ACTIVE_ORDER


def test_order_with_one_active_order():
    assert parse_command("/order chocolate", WAFFLES) == AddItem("waffles", "chocolate")
    assert parse_command("/order Large Chocolate ", WAFFLES) == AddItem("waffles", "large chocolate")
    assert parse_command("/order waffles chocolate", WAFFLES) == AddItem("waffles", "chocolate")
    assert parse_command("/order waffles Large  Chocolate", WAFFLES) == AddItem("waffles", "large chocolate")


def test_order_with_one_active_order_needs_an_item():
    result = parse_command("/order", WAFFLES)
    assert error_kind(result) == ErrorKind.INVALID_SYNTAX
    assert result.message == "Specify the name of the item you wish to order. For example, /order chocolate."

    assert error_kind(parse_command("/order waffles", WAFFLES)) == ErrorKind.INVALID_SYNTAX


def test_order_with_multiple_active_orders():
    assert parse_command("/order waffles chocolate", WAFFLES_AND_PIZZA) == AddItem("waffles", "chocolate")
    assert parse_command("/order  waffles LARGE  CHOCOLATE ", WAFFLES_AND_PIZZA) == AddItem("waffles", "large chocolate")
    assert parse_command("/order pizza Barbecue chicken", WAFFLES_AND_PIZZA) == AddItem("pizza", "barbecue chicken")


def test_order_with_multiple_active_orders_needs_the_order_name():
    expected = "Specify the order name and item you wish to order. For example, /order waffles chocolate."

    result = parse_command("/order chocolate", WAFFLES_AND_PIZZA)
    assert error_kind(result) == ErrorKind.AMBIGUOUS_ORDER_NAME
    assert result.message == expected

    result = parse_command("/order", WAFFLES_AND_PIZZA)
    assert error_kind(result) == ErrorKind.AMBIGUOUS_ORDER_NAME

    result = parse_command("/order waffles", WAFFLES_AND_PIZZA)
    assert error_kind(result) == ErrorKind.INVALID_SYNTAX
    assert result.message == expected

    result = parse_command("/order ice-cream chocolate cone", WAFFLES_AND_PIZZA)
    assert error_kind(result) == ErrorKind.ORDER_NOT_FOUND
    assert result.message.startswith("Order ice-cream not found.")


def test_cancel():
    assert error_kind(parse_command("/cancel", NO_ORDERS)) == ErrorKind.NO_ACTIVE_ORDER
    assert parse_command("/cancel", NO_ORDERS) == parse_command("/cancel waffles", NO_ORDERS)

    assert parse_command("/cancel", WAFFLES) == RemoveItem("waffles")
    assert parse_command("/cancel Waffles", WAFFLES) == RemoveItem("waffles")
    assert error_kind(parse_command("/cancel ice-cream", WAFFLES)) == ErrorKind.ORDER_NOT_FOUND

    result = parse_command("/cancel", WAFFLES_AND_PIZZA)
    assert error_kind(result) == ErrorKind.AMBIGUOUS_ORDER_NAME
    assert "/cancel waffles" in result.message
    assert parse_command("/cancel PIZZA ", WAFFLES_AND_PIZZA) == RemoveItem("pizza")
    assert parse_command("/cancel ice-cream", WAFFLES_AND_PIZZA) == CommandError(
        ErrorKind.ORDER_NOT_FOUND, "Order ice-cream not found."
    )
