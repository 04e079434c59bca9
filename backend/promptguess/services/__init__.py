"""Game domain services: scoring, leaderboard, round session and image provider."""
