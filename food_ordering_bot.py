import logging
from telegram import Update
from telegram.ext import Application, ApplicationBuilder, CallbackQueryHandler, MessageHandler, filters
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from controllers.bot import FoodOrderingBot
from controllers.handle_button import handle_button
from controllers.handle_message import handle_message
from tasks.report_active_orders import report_active_orders
from utils import config

def build_application(token: str, ordering_bot: FoodOrderingBot) -> Application:
    async def post_init(app: Application):
        # Set up the scheduler to report active orders periodically.
        if config.STATUS_REPORT_MINUTES > 0:
            scheduler = AsyncIOScheduler()
            scheduler.add_job(report_active_orders, 'interval', minutes=config.STATUS_REPORT_MINUTES, args=[ordering_bot])
            scheduler.start()
            app.bot_data["scheduler"] = scheduler

    async def post_shutdown(app: Application):
        scheduler = app.bot_data.get("scheduler")
        if scheduler is not None:
            scheduler.shutdown(wait=False)

    app = ApplicationBuilder().token(token).post_init(post_init).post_shutdown(post_shutdown).build()
    app.bot_data["ordering_bot"] = ordering_bot

    # Commands in any chat, and plain text in private chats, go through the command parser.
    app.add_handler(MessageHandler(filters.TEXT & (filters.COMMAND | filters.ChatType.PRIVATE), handle_message))

    # Register the callback query handler for inline buttons.
    app.add_handler(CallbackQueryHandler(handle_button))
    return app

def main():
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.LOG_LEVEL
    )
    # httpx logs every long poll request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not config.TELEGRAM_TOKEN:
        raise RuntimeError("TELEGRAM_TOKEN not set")

    ordering_bot = FoodOrderingBot(keep_empty_items=config.KEEP_EMPTY_ITEMS, bot_mention=config.BOT_MENTION)
    app = build_application(config.TELEGRAM_TOKEN, ordering_bot)

    # Start polling.
    app.run_polling(allowed_updates=[Update.MESSAGE, Update.CALLBACK_QUERY])

if __name__ == '__main__':
    main()
