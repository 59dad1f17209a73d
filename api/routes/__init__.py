"""API routes package"""

from . import auth, users, foods, plans, community, health

__all__ = ["auth", "users", "foods", "plans", "community", "health"]
