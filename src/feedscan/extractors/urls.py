"""Profile link recognition and normalization."""

import logging
import re
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urljoin, urlparse

from ..constants import (
    FACEBOOK_BASE_URL,
    NON_PROFILE_LINK_MARKERS,
    RESERVED_PROFILE_PATHS,
    TRACKING_PARAMS,
)

logger = logging.getLogger("feedscan")

_USER_ID = re.compile(r"/user/(\d+)")
_PEOPLE_ID = re.compile(r"/people/[^/]+/(\d+)")
_HANDLE_PATH = re.compile(r"^/([A-Za-z0-9._-]+)/?$")


def _is_site_host(netloc: str) -> bool:
    host = netloc.lower().split(":")[0]
    return host == "facebook.com" or host.endswith(".facebook.com")


def _absolute(href: str):
    return urlparse(urljoin(FACEBOOK_BASE_URL + "/", href.strip()))


def _handle_from_path(path: str) -> Optional[str]:
    match = _HANDLE_PATH.match(path)
    if not match:
        return None
    handle = match.group(1)
    if handle.lower() in RESERVED_PROFILE_PATHS:
        return None
    return handle


def is_profile_url(href: Optional[str]) -> bool:
    """Check whether a link points at a person or page profile.

    Accepts /user/<id>, profile.php, /people/<name>/<id> and bare
    /<handle> links on the site; rejects group, post, photo and share links.
    """
    if not href:
        return False

    has_user = "/user/" in href
    for marker in NON_PROFILE_LINK_MARKERS:
        if marker in href and not has_user:
            return False

    try:
        parsed = _absolute(href)
    except ValueError:
        return False
    if not _is_site_host(parsed.netloc):
        return False

    if _USER_ID.search(href) or "profile.php" in href or _PEOPLE_ID.search(href):
        return True
    return _handle_from_path(parsed.path) is not None


def normalize_profile_url(href: Optional[str]) -> Optional[str]:
    """Reduce a profile link to one stable form.

    Numeric ids become profile.php?id=<id>; handles become /<handle>;
    tracking parameters are dropped.

    Returns:
        Normalized absolute URL, or None when the link is not usable.
    """
    if not href:
        return None

    try:
        parsed = _absolute(href)
    except ValueError as e:
        logger.debug(f"URL normalization failed for {href}: {e}")
        return None

    if not _is_site_host(parsed.netloc):
        return None

    path = parsed.path
    params = [(k, v) for k, v in parse_qsl(parsed.query, keep_blank_values=True)
              if k not in TRACKING_PARAMS]

    match = _USER_ID.search(path) or _PEOPLE_ID.search(path)
    if match:
        return f"{FACEBOOK_BASE_URL}/profile.php?id={match.group(1)}"

    if path.rstrip("/").endswith("/profile.php"):
        profile_id = dict(params).get("id")
        if profile_id:
            return f"{FACEBOOK_BASE_URL}/profile.php?id={profile_id}"
        return None

    handle = _handle_from_path(path)
    if handle:
        return f"{FACEBOOK_BASE_URL}/{handle}"

    clean_path = path.rstrip("/")
    if clean_path:
        query = urlencode(params)
        return f"{FACEBOOK_BASE_URL}{clean_path}" + (f"?{query}" if query else "")
    return None
