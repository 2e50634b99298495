"""Link-discovery pipeline: raw extracted hrefs in, crawlable links out."""

from dataclasses import dataclass, field

from core.scoper import (
    exclude_image_links,
    filter_links_by_domain,
    registrable_domain,
)
from utils.logger import get_logger
from utils.string_utils import remove_blank, trim_all
from utils.url_utils import (
    ensure_trailing_slash,
    is_url,
    strip_fragment,
    strip_query,
)

log = get_logger("pipeline")


@dataclass
class LinkReport:
    """Outcome of one pipeline run. Every raw link ends up either eligible or dropped."""
    reference_domain: str
    registrable_domain: str
    include_subdomains: bool
    raw_count: int = 0
    eligible: list = field(default_factory=list)
    dropped: list = field(default_factory=list)  # [{"url": ..., "reason": ...}, ...]

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)

    def to_dict(self) -> dict:
        return {
            "reference_domain": self.reference_domain,
            "registrable_domain": self.registrable_domain,
            "include_subdomains": self.include_subdomains,
            "raw_count": self.raw_count,
            "eligible": self.eligible,
            "eligible_count": len(self.eligible),
            "dropped": self.dropped,
            "dropped_count": self.dropped_count,
        }


def normalize_link(url: str) -> str:
    """Strip fragment and query, then add a trailing slash to directory-like URLs."""
    return ensure_trailing_slash(strip_query(strip_fragment(url)))


def _drop(report: LinkReport, urls: list[str], reason: str) -> None:
    report.dropped.extend({"url": u, "reason": reason} for u in urls)


def discover_links(
    raw_links: list[str],
    reference_domain: str,
    include_subdomains: bool = False,
) -> LinkReport:
    """
    Run raw links through normalize -> classify -> scope -> image filter.

    Args:
        raw_links: Hrefs as extracted from a page
        reference_domain: Domain the crawl is scoped to
        include_subdomains: Keep links on any subdomain of the reference domain

    Returns:
        LinkReport with eligible links in first-seen order
    """
    report = LinkReport(
        reference_domain=reference_domain,
        registrable_domain=registrable_domain(reference_domain),
        include_subdomains=include_subdomains,
        raw_count=len(raw_links),
    )

    _drop(report, [u for u in raw_links if not isinstance(u, str)], "not_url")
    _drop(report, [u for u in raw_links if isinstance(u, str) and not u.strip()], "blank")
    non_blank = remove_blank(raw_links)

    normalized = [normalize_link(u) for u in trim_all(non_blank)]

    urls = [u for u in normalized if is_url(u)]
    _drop(report, [u for u in normalized if not is_url(u)], "not_url")

    in_domain = filter_links_by_domain(reference_domain, urls, include_subdomains)
    kept = set(in_domain)
    _drop(report, [u for u in urls if u not in kept], "off_domain")

    pages = exclude_image_links(in_domain)
    kept = set(pages)
    _drop(report, [u for u in in_domain if u not in kept], "image")

    seen = set()
    for url in pages:
        if url in seen:
            _drop(report, [url], "duplicate")
        else:
            seen.add(url)
            report.eligible.append(url)

    log.info(
        f"{report.registrable_domain}: {len(report.eligible)} eligible of "
        f"{report.raw_count} raw links ({report.dropped_count} dropped)"
    )
    return report
