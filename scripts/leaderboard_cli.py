"""
Leaderboard CLI: print the TopStats bot rankings.

Usage examples:
  python -m scripts.leaderboard_cli --sort-by monthly_votes_rank --limit 10
  python -m scripts.leaderboard_cli --sort-by server_count_rank --method asc
"""

from __future__ import annotations

import argparse
import sys

from topstats import SortBy, SortMethod, TopStatsClient, TopStatsError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the topstats.gg bot leaderboard")
    parser.add_argument(
        "--sort-by",
        choices=[s.value for s in SortBy],
        default=SortBy.MONTHLY_VOTES_RANK.value,
        help="Ranking to sort by (default: monthly_votes_rank)",
    )
    parser.add_argument(
        "--method",
        choices=[m.value for m in SortMethod],
        default=SortMethod.ASC.value,
        help="Sort direction (default: asc)",
    )
    parser.add_argument("--limit", type=int, default=10, help="Rows to return, 1-500 (default: 10)")
    args = parser.parse_args(argv)

    try:
        with TopStatsClient.from_env() as client:
            page = client.get_rankings(args.sort_by, args.method, args.limit)
    except TopStatsError as e:
        print(f"{e.kind.value}: {e}", file=sys.stderr)
        return 2

    rank_field = args.sort_by
    for entry in page.data:
        print(f"{getattr(entry, rank_field):>5} {entry.id} {entry.name}")
    print(f"({len(page.data)} of {page.totalBotCount} bots)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
