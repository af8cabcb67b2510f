import hmac

from ..core.config import settings


def normalize_email(email: str) -> str:
    """Return a normalized email address for comparison and storage."""
    return (email or "").strip().lower()


def verify_admin_token(token: str | None) -> bool:
    """Compare ``token`` against ``ADMIN_API_TOKEN`` in constant time.

    An unset server token disables the admin surface entirely.
    """
    expected = settings.ADMIN_API_TOKEN or ""
    if not expected or not token:
        return False
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))
