"""
Password Codec

bcrypt hashing of salted passwords. The blocking bcrypt calls run in a
worker thread so async views can await them.
"""

import asyncio

import bcrypt

# bcrypt only reads this many bytes; newer releases raise instead of truncating
BCRYPT_MAX_BYTES = 72


def salt_password(password, salt):
    """Append the shared configuration salt to a submitted password."""
    return (password or '') + (salt or '')


def _encode(salted_password):
    return salted_password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(salted_password, rounds=10):
    return bcrypt.hashpw(_encode(salted_password), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def verify_password(salted_password, password_hash):
    return bcrypt.checkpw(_encode(salted_password), password_hash.encode('utf-8'))


async def hash_password_async(salted_password, rounds=10):
    """Hash without blocking the event loop. Errors from bcrypt propagate."""
    return await asyncio.to_thread(hash_password, salted_password, rounds)


async def verify_password_async(salted_password, password_hash):
    return await asyncio.to_thread(verify_password, salted_password, password_hash)
