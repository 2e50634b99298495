"""Domain scoping and image filtering for discovered links."""

import re
from functools import lru_cache

from utils.string_utils import filter_strings

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".ico")
PATTERN_CACHE_SIZE = 256

_LABEL_RE = re.compile(r"[-\w]+", re.ASCII)


class InvalidDomainError(ValueError):
    """Raised when a reference domain cannot be reduced to two labels."""


def registrable_domain(domain: str) -> str:
    """
    Reduce a hostname to its last two labels.

    ``foo.bar.example.com`` -> ``example.com``. Raises InvalidDomainError for
    single-label or malformed input such as ``localhost`` or ``example.``.
    """
    if not isinstance(domain, str) or not domain.strip():
        raise InvalidDomainError(f"Invalid reference domain: {domain!r}")

    labels = domain.strip().split(".")
    if len(labels) < 2:
        raise InvalidDomainError(f"Reference domain needs at least two labels: {domain!r}")

    tail = labels[-2:]
    for label in tail:
        if not _LABEL_RE.fullmatch(label):
            raise InvalidDomainError(f"Invalid label {label!r} in reference domain {domain!r}")
    return ".".join(tail)


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _domain_pattern(registrable: str, include_subdomains: bool) -> re.Pattern:
    escaped = re.escape(registrable)
    if include_subdomains:
        pattern = rf"^https?://([-\w\d]+\.)*{escaped}/.*$"
    else:
        # www is treated as no subdomain
        pattern = rf"^https?://(www\.)?{escaped}/.*$"
    return re.compile(pattern, re.ASCII)


def filter_links_by_domain(
    reference_domain: str,
    links: list[str],
    include_subdomains: bool,
) -> list[str]:
    """
    Keep links that live on the reference domain's registrable domain.

    Args:
        reference_domain: Hostname to scope against, e.g. "blog.example.com"
        links: Candidate links, already stripped of fragment and query
        include_subdomains: Accept any subdomain, or only the bare domain and www

    Returns:
        Matching links in input order.
    """
    regex = _domain_pattern(registrable_domain(reference_domain), bool(include_subdomains))
    return filter_strings(links, lambda link: isinstance(link, str) and regex.fullmatch(link) is not None)


def is_image_link(link: str) -> bool:
    return isinstance(link, str) and link.lower().endswith(IMAGE_EXTENSIONS)


def exclude_image_links(links: list[str]) -> list[str]:
    """Drop links pointing at images and non-strings, keeping order and duplicates."""
    return filter_strings(links, lambda link: isinstance(link, str) and not is_image_link(link))
