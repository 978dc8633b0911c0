"""
Password hashing and password reset tokens.
"""

import hmac
import secrets

import bcrypt

from config.settings import Settings


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt (BCRYPT_ROUNDS in Settings)."""
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = password.encode('utf-8')[:72]
    hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=Settings.BCRYPT_ROUNDS))
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a bcrypt hash."""
    password_bytes = plain_password.encode('utf-8')[:72]
    return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))


def generate_reset_token() -> str:
    """Create the token sent in a password reset confirmation link."""
    return secrets.token_urlsafe(32)


def tokens_match(expected: str, given: str) -> bool:
    """Compare tokens in constant time."""
    return hmac.compare_digest(expected.encode('utf-8'), given.encode('utf-8'))
