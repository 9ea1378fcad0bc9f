import logging

async def report_active_orders(bot):
    """Logs how many orders are open, and in how many conversations."""
    conversations = len(bot.conversations)
    if not conversations:
        logging.info("[STATUS] No active orders")
        return
    logging.info(f"[STATUS] {bot.active_order_count()} active order(s) in {conversations} conversation(s)")
