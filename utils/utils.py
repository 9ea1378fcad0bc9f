import logging
from typing import Optional, Sequence
from telegram import InlineKeyboardMarkup, InlineKeyboardButton

from models.user import User

# Telegram rejects callback data longer than this many bytes
MAX_CALLBACK_DATA_BYTES = 64

def to_user(telegram_user) -> User:
    """Converts a Telegram user into the bot's User."""
    return User(id=telegram_user.id, first_name=telegram_user.first_name)

def get_orders_keyboard(layout: Optional[Sequence[Sequence]]) -> Optional[InlineKeyboardMarkup]:
    """Generates the inline keyboard for rows of (label, callback data) pairs."""
    if not layout:
        return None

    keyboard = []
    for row in layout:
        buttons = []
        for label, payload in row:
            if len(payload.encode("utf-8")) > MAX_CALLBACK_DATA_BYTES:
                logging.warning(f"Skipping button {label!r}, callback data is too long")
                continue
            buttons.append(InlineKeyboardButton(label, callback_data=payload))
        if buttons:
            keyboard.append(buttons)
    return InlineKeyboardMarkup(keyboard) if keyboard else None
