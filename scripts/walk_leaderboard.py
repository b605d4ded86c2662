# scripts/walk_leaderboard.py
"""
Walk the TETRA LEAGUE leaderboard page by page using prisecter bounds.

All pages are fetched with one session id so they come from the same
snapshot of the leaderboard.
"""
import argparse
from typing import Optional

from dotenv import load_dotenv

from tetrio import Client, params
from tetrio.api.params.user_leaderboard import SearchCriteria

load_dotenv()


def walk(client: Client, pages: int, page_size: int, country: Optional[str] = None):
    criteria = SearchCriteria().limit(page_size)
    if country:
        criteria = criteria.country(country)

    for page in range(1, pages + 1):
        response = client.get_leaderboard(params.LeaderboardType.LEAGUE, criteria)
        if not response.is_success:
            print(f"[WALK] FAIL on page {page}: {response.error.msg if response.error else '?'}")
            return
        entries = response.data.entries
        print(f"[WALK] page {page}: {len(entries)} entries")
        for entry in entries:
            print(f"  {entry.username:<20} {entry.league.tr}")
        if len(entries) < page_size:
            return
        criteria = criteria.after(entries[-1].prisecter.to_array())


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk the TETRA LEAGUE leaderboard.")
    parser.add_argument("--pages", type=int, default=3)
    parser.add_argument("--page-size", type=int, default=25)
    parser.add_argument("--country", default=None, help="ISO 3166-1 country code")
    args = parser.parse_args()

    with Client.with_session_id() as client:
        print(f"[WALK] session id: {client.session_id}")
        walk(client, args.pages, args.page_size, args.country)


if __name__ == "__main__":
    main()
