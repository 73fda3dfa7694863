"""
main.py
-------
Entry point for the NetQuiz Telegram bot.

Responsibilities:
    - Load configuration from the environment / .env.
    - Open the SQLite question store, create the schema and seed it.
    - Resolve the bot identity and run the update loop.
"""

import asyncio
import sys

from telegram import Bot
from telegram.error import TelegramError

from config import Config, load_config
from db.connection import close_connection, init_connection
from db.init_db import create_tables
from db.seed_data import DEFAULT_QUESTIONS
from handlers.dispatcher import BOT_COMMANDS, UpdateDispatcher
from repositories.question_repo import QuestionRepository
from services.telegram_gateway import TelegramGateway
from utils.errors import ConfigError, StorageError, TransportError
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def init_store(config: Config) -> None:
    """Open the database, ensure the schema, and seed an empty store."""
    init_connection(config.sqlite_path)
    create_tables()
    QuestionRepository().seed_if_empty(DEFAULT_QUESTIONS)


async def run_bot(config: Config) -> None:
    """Resolve the bot identity, register commands, and poll forever."""
    async with Bot(config.bot_token) as bot:
        gateway = TelegramGateway(bot)
        username = await gateway.get_username()
        logger.info(f"Bot @{username} started")

        try:
            await gateway.set_commands(BOT_COMMANDS)
        except TransportError as e:
            logger.warning(f"Could not register command menu: {e}")

        dispatcher = UpdateDispatcher(
            gateway,
            bot_username=username,
            poll_timeout=config.poll_timeout,
            retry_delay=config.retry_delay,
        )
        await dispatcher.run()


def main() -> int:
    """Initialize and run the bot. Returns the process exit code."""

    # ── 1. Configuration ──────────────────────────────────
    logger.info("🚀 Starting bot...")
    try:
        config = load_config()
    except ConfigError as e:
        logger.critical(f"Configuration error: {e}")
        return 1
    setup_logging(config.log_level)

    # ── 2. Question store ─────────────────────────────────
    try:
        init_store(config)
    except StorageError as e:
        logger.critical(f"Database error: {e}")
        close_connection()
        return 1

    # ── 3. Poll Telegram ──────────────────────────────────
    try:
        asyncio.run(run_bot(config))
    except (TransportError, TelegramError) as e:
        # Bot.initialize() calls getMe itself and raises TelegramError directly
        logger.critical(f"Bot error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down.")
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_connection()
        logger.info("Bot stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
