"""Service layer helpers."""

from .broadcaster import LEADERBOARD_EVENT, LeaderboardBroadcaster, get_broadcaster
from .leaderboard import get_leaderboard, user_to_dict
from .seed import SEED_USER_NAMES, seed_users

__all__ = [
    "LEADERBOARD_EVENT",
    "LeaderboardBroadcaster",
    "SEED_USER_NAMES",
    "get_broadcaster",
    "get_leaderboard",
    "seed_users",
    "user_to_dict",
]
