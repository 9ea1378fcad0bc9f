import logging
from telegram import Update
from telegram.ext import CallbackContext

from utils.utils import get_orders_keyboard, to_user
from views import messages

async def handle_message(update: Update, context: CallbackContext):
    """
    Handles a text command sent to the bot and replies to it with the result.
    """
    message = update.message
    if message is None or message.text is None:
        return

    bot = context.bot_data["ordering_bot"]
    had_active_orders = bot.has_active_orders()

    result = bot.handle_message(update.effective_chat.id, to_user(update.effective_user), message.text)
    await message.reply_text(
        result.message,
        reply_markup=get_orders_keyboard(result.buttons),
        do_quote=True
    )

    log_status_change(had_active_orders, bot.has_active_orders())

def log_status_change(had_active_orders: bool, has_active_orders: bool):
    if had_active_orders != has_active_orders:
        logging.info(messages.STATUS_ACTIVE if has_active_orders else messages.STATUS_IDLE)
