"""Cookie header helpers.

YouTube serves a legal consent interstitial instead of the playlist to
clients without a consent cookie, so every outbound Cookie header has
to carry one.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def with_consent_cookie(cookie: str | None, consent: str, consent_name: str) -> str:
    """Ensure a Cookie header value contains the consent cookie.

    Args:
        cookie: Existing Cookie header value, if any.
        consent: Full consent cookie (``name=value``).
        consent_name: Prefix identifying an existing consent cookie (``name=``).

    Returns:
        The consent cookie alone, the existing value untouched when it
        already consents, or the existing value with the consent appended.
    """
    if not cookie:
        return consent
    if consent_name in cookie:
        return cookie
    return f"{cookie}; {consent}"


def load_cookie_header(cookies_path: Path) -> str | None:
    """Build a Cookie header from a Netscape format cookies.txt.

    Only cookies scoped to a youtube.com domain are used.

    Args:
        cookies_path: Path to cookies.txt, as exported by browser extensions.

    Returns:
        Cookie header string (name=value; name2=value2), or None if the
        file is unreadable or holds no YouTube cookies.
    """
    try:
        content = cookies_path.read_text()
    except OSError as e:
        logger.warning("Failed to read cookies file %s: %s", cookies_path, e)
        return None

    pairs: list[str] = []
    for line in content.splitlines():
        line = line.strip()
        # HttpOnly cookies are written as comments with this prefix
        if line.startswith("#HttpOnly_"):
            line = line[len("#HttpOnly_") :]
        elif not line or line.startswith("#"):
            continue

        # domain, include_subdomains, path, secure, expiry, name, value
        parts = line.split("\t")
        if len(parts) < 7 or not parts[0].endswith("youtube.com"):
            continue
        pairs.append(f"{parts[5]}={parts[6]}")

    if not pairs:
        logger.debug("No YouTube cookies found in %s", cookies_path)
        return None
    return "; ".join(pairs)
