"""
Password hashing helpers.

Passwords are hashed with bcrypt using a per-password random salt and
a configurable cost factor (``settings.bcrypt_rounds``, 10 by default).
The resulting ``$2b$...`` string embeds salt and cost, so verification
needs nothing but the stored hash.

bcrypt only considers the first 72 bytes of a password.  Longer
inputs are truncated explicitly before hashing and before checking,
so both sides always see the same bytes.
"""

from typing import Optional

import bcrypt

from .config import settings


BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a plain text password.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    rounds : Optional[int]
        bcrypt cost factor.  Defaults to ``settings.bcrypt_rounds``.

    Returns
    -------
    str
        The bcrypt hash, safe to store as text.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns ``False`` rather than raising when the stored value is not
    a bcrypt hash at all.
    """
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def is_new_password(password: Optional[str]) -> bool:
    """Tell whether a profile update carries a password to re-hash.

    Empty values and the placeholder echoed back by profile forms mean
    the password was left untouched.
    """
    return bool(password) and password != settings.password_placeholder
