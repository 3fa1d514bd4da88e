"""
Models Package

Exports all tables and store helpers for easy importing.
"""

from opencall.models.user import User, users, find_user, insert_user, count_users
from opencall.models.admin import admins, find_admin_permissions, ensure_admin

__all__ = [
    'User',
    'users',
    'find_user',
    'insert_user',
    'count_users',
    'admins',
    'find_admin_permissions',
    'ensure_admin',
]
