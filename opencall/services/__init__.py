"""
Services Package

Exports all services for easy importing.
"""

from opencall.services.sanitize import sanitize_email, sanitize_name, is_valid_email
from opencall.services.passwords import (
    salt_password,
    hash_password,
    verify_password,
    hash_password_async,
    verify_password_async,
)

__all__ = [
    'sanitize_email',
    'sanitize_name',
    'is_valid_email',
    'salt_password',
    'hash_password',
    'verify_password',
    'hash_password_async',
    'verify_password_async',
]
