import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}

def get_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    try:
        return int(value) if value else default
    except ValueError:
        raise RuntimeError(f"{name} must be a whole number, got {value!r}") from None

TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN")
BOT_MENTION = os.getenv("BOT_MENTION", "@food_ordering_bot")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Minutes between active order status reports, 0 turns them off
STATUS_REPORT_MINUTES = get_int("STATUS_REPORT_MINUTES", 30)

# Keep items nobody has selected anymore, so their buttons stay available
KEEP_EMPTY_ITEMS = get_bool("KEEP_EMPTY_ITEMS")
