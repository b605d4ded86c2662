"""
grab_user.py

Goal:
- Load .env
- Call TETRA CHANNEL API: GET /users/{user} and /users/{user}/summaries/league
- Print full raw JSON output
- Also print quick league fields
"""

import json
import os

from dotenv import load_dotenv

from tetrio import Client
from tetrio.models import LeagueData


def main() -> None:
    # --- Load .env ---
    load_dotenv()

    user = os.getenv("TETRIO_USER", "").strip()
    if not user:
        raise SystemExit("ERROR: TETRIO_USER is missing in .env")

    with Client.from_env() as client:
        profile = client.get_user(user)
        if not profile.is_success:
            raise SystemExit(f"ERROR: {profile.error.msg if profile.error else 'unknown error'}")

        print("\n=== USER (RAW JSON) ===")
        print(json.dumps(profile.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))

        league = client.get_user_league(user)

    print("\n=== LEAGUE QUICK PEEK ===")
    print("username: ", profile.data.username)
    print("level:    ", profile.data.level)
    print("country:  ", profile.data.country)
    if league.is_success and isinstance(league.data, LeagueData):
        print("rank:     ", league.data.rank.display_name if league.data.rank else None)
        print("tr:       ", league.data.tr)
        print("gxe:      ", league.data.gxe)
        print("progress: ", league.data.rank_progress)
    else:
        print("(no league data)")


if __name__ == "__main__":
    main()
