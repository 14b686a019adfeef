import logging

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)


def fetch_document(url: str, timeout: float = 15.0, user_agent: str = "Mozilla/5.0") -> bytes:
    """Download a response sheet. The scoring core never calls this itself."""
    url = (url or "").strip()
    if not url.startswith(("http://", "https://")):
        raise FetchError(f"Not a web address: {url!r}")

    logger.info("Fetching response sheet from %s", url)
    try:
        res = requests.get(url, timeout=timeout, headers={"User-Agent": user_agent})
        res.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Fetching %s failed: %s", url, e)
        raise FetchError(str(e)) from e
    # raw bytes; the parser reads the charset from the page itself
    return res.content
