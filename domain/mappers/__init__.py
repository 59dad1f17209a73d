"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.plan_mapper import PlanMapper
from domain.mappers.community_mapper import CommunityMapper

__all__ = ["UserMapper", "PlanMapper", "CommunityMapper"]
