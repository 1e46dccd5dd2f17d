"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ACCESS_TOKEN_MINUTES = 24 * 60
JWT_ALGORITHM = "HS256"

# date.weekday(): Saturday=5, Sunday=6
WEEKEND_DAYS = frozenset({5, 6})
