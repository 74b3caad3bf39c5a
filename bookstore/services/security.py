"""
Security Service

Customer credential hashing.

Usage:
    from bookstore.services.security import hash_password, verify_password

    hashed = hash_password("SecurePass123")
    is_valid = verify_password("SecurePass123", hashed)
"""

from passlib.context import CryptContext

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# pbkdf2_sha256 is implemented by passlib itself, so no native backend
# is needed. deprecated="auto" lets stored hashes be upgraded if the
# scheme list changes later.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password.

    Example:
        >>> hashed = hash_password("SecurePass123")
        >>> hashed.startswith("$pbkdf2-sha256$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a stored hash.

    Hashes that passlib does not recognise (e.g. placeholder values in
    imported data) never verify.
    """
    if not pwd_context.identify(hashed_password):
        return False
    return pwd_context.verify(plain_password, hashed_password)
