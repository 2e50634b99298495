"""URL classification and normalization for extracted links."""

import re

# Extensions marking a link as a file rather than a directory-like page.
FILE_EXTENSIONS = (
    ".htm", ".html", ".xml",
    ".jpeg", ".jpg", ".png", ".ico", ".gif",
    ".php",
)

_URL_RE = re.compile(r"https?://\S+\.\S+")
# Greedy: everything up to the last delimiter is kept.
_BEFORE_FRAGMENT_RE = re.compile(r"^(.*)#.*$", re.DOTALL)
_BEFORE_QUERY_RE = re.compile(r"^(.*)\?.*$", re.DOTALL)


def is_url(candidate: str) -> bool:
    """Check for an absolute http(s) URL with at least one dot after the scheme."""
    if not isinstance(candidate, str) or not candidate:
        return False
    return _URL_RE.fullmatch(candidate) is not None


def is_file_resource(candidate: str) -> bool:
    """Check if the URL ends with a known file extension (case-insensitive)."""
    if not isinstance(candidate, str):
        return False
    return candidate.lower().endswith(FILE_EXTENSIONS)


def extract_domain(url: str) -> str:
    """Return the host part of ``scheme://host/...``, or "" if there is none."""
    parts = (url or "").split("/")
    if len(parts) < 3:
        return ""
    return parts[2]


def strip_fragment(url: str) -> str:
    """Remove the ``#...`` tail. With several ``#`` only the last one is cut."""
    m = _BEFORE_FRAGMENT_RE.match(url or "")
    if m:
        return m.group(1)
    return url


def strip_query(url: str) -> str:
    """Remove the ``?...`` tail. With several ``?`` only the last one is cut."""
    m = _BEFORE_QUERY_RE.match(url or "")
    if m:
        return m.group(1)
    return url


def ensure_trailing_slash(url: str) -> str:
    """Append "/" to directory-like URLs that lack one."""
    if not url or is_file_resource(url) or url.endswith("/"):
        return url
    return url + "/"
