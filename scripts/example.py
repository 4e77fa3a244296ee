"""
Walk through the main TopStats calls for one bot.

Usage:
  TOPSTATS_TOKEN=... python -m scripts.example
"""
import logging
import sys

from topstats import MetricType, SortBy, SortMethod, TimeFrame, TopStatsClient, TopStatsError

BOT_ID = "583807014896140293"

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")


def main() -> int:
    try:
        client = TopStatsClient.from_env()
    except TopStatsError as e:
        logging.error(f"Error: {e}")
        logging.error("Please set TOPSTATS_TOKEN in your .env file or environment.")
        return 1

    with client:
        bot = client.get_bot(BOT_ID)
        logging.info(f"Bot: {bot.name} - servers={bot.server_count} monthly_votes={bot.monthly_votes}")

        history = client.get_bot_historical(BOT_ID, TimeFrame.ONE_DAY, MetricType.TOTAL_VOTES)
        logging.info(f"24h history: {len(history)} entries")
        if history:
            logging.info(f"First entry: {history[0]}")

        history_7d = client.get_bot_historical(BOT_ID, TimeFrame.SEVEN_DAYS, MetricType.MONTHLY_VOTES)
        logging.info(f"7d history: {len(history_7d)} entries")

        recent = client.get_bot_recent(BOT_ID)
        logging.info(f"Recent stats: hourly={len(recent.hourlyData)} daily={len(recent.dailyData)}")

        rankings = client.get_rankings(SortBy.MONTHLY_VOTES_RANK, SortMethod.DESC)
        logging.info(f"Top bots: {rankings.totalBotCount} total bots")
    return 0


if __name__ == "__main__":
    sys.exit(main())
