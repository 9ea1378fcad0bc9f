import logging
from telegram import InaccessibleMessage, Update
from telegram.error import BadRequest
from telegram.ext import CallbackContext

from controllers.command_parser import normalize_message
from controllers.handle_message import log_status_change
from utils.utils import get_orders_keyboard, to_user

VIEW_COMMANDS = ("/view", "/view_orders")

def is_reply_to_view(message, bot_mention: str) -> bool:
    """Whether the bot's message was sent in reply to a /view command."""
    command_message = getattr(message, "reply_to_message", None)
    if command_message is None or not command_message.text:
        return False
    tokens = normalize_message(command_message.text, bot_mention)
    return bool(tokens) and tokens[0] in VIEW_COMMANDS

async def handle_button(update: Update, context: CallbackContext):
    """
    Handles taps on the item buttons attached to order messages. The tap
    selects or cancels an item, then the message is edited to show the result.
    """
    query = update.callback_query
    bot = context.bot_data["ordering_bot"]
    had_active_orders = bot.has_active_orders()

    # the bot can no longer read or edit messages that were deleted or are too old
    message = None if isinstance(query.message, InaccessibleMessage) else query.message

    result, answer = bot.handle_callback_query(
        update.effective_chat.id,
        to_user(update.effective_user),
        query.data or "",
        is_reply_to_view(message, bot.bot_mention)
    )
    await query.answer(answer)
    log_status_change(had_active_orders, bot.has_active_orders())

    # failed taps leave the message as it is
    if not result.success or message is None:
        return

    try:
        await message.edit_text(result.message, reply_markup=get_orders_keyboard(result.buttons))
    except BadRequest as e:
        logging.warning(f"Failed to edit order message {message.message_id}: {e}")
