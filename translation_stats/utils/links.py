"""Outbound link helpers."""

from urllib.parse import urlencode, urlsplit, urlunsplit


def campaign_link(url: str, source: str, medium: str, campaign: str) -> str:
    """Append ``utm_*`` campaign parameters to *url*, keeping its own query."""
    parts = urlsplit(url)
    params = urlencode(
        {"utm_source": source, "utm_medium": medium, "utm_campaign": campaign}
    )
    query = f"{parts.query}&{params}" if parts.query else params
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
