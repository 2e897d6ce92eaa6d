"""
Users Module

Applicant accounts: registration, lookup by id/email, listing by role.
"""

from admissions.modules.users.models import User, UserRole
from admissions.modules.users.repository import UserRepository

__all__ = ["User", "UserRole", "UserRepository"]
