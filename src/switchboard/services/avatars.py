"""Avatar URL validation.

Only the URL itself is checked: it must be absolute, use an allowed
scheme and name a host. Fetching the image (size, MIME type,
dimensions) belongs to the gateway and is not done here.
"""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlsplit

from switchboard.services.result import ErrorCode, ServiceResult

DEFAULT_SCHEMES = ("http", "https")


def verify_avatar_url(url: str, *, allowed_schemes: Sequence[str] = DEFAULT_SCHEMES) -> ServiceResult:
    """Return an ok result for a usable avatar URL, an INVALID_URL failure otherwise."""
    candidate = url.strip()
    if any(ch.isspace() for ch in candidate):
        return _invalid(url)
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return _invalid(url)

    if not parts.scheme or not parts.netloc:
        return _invalid(url)
    if parts.scheme.lower() not in {s.lower() for s in allowed_schemes}:
        return _invalid(url, scheme=parts.scheme)
    return ServiceResult.success("verify_avatar_url", url=candidate)


def _invalid(url: str, **detail: str) -> ServiceResult:
    return ServiceResult.failure(
        "verify_avatar_url", ErrorCode.INVALID_URL, f"Invalid URL: `{url}`.", **detail
    )
