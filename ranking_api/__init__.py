"""Random Ranking API: users, point claims and a live leaderboard."""
