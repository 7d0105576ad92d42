"""Download the raw pages behind a :class:`ResultSet`.

Pages are requested one after another with ``throttle_sec`` between them;
Lens blocks clients that page through results too quickly. Parsing the HTML is
left to the caller.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import requests

from .config import LensConfig
from .utils.http import build_session

logger = logging.getLogger(__name__)


def fetch_pages(
    urls: Iterable[str],
    config: Optional[LensConfig] = None,
    session: Optional[requests.Session] = None,
    throttle_sec: Optional[float] = None,
) -> Iterator[Tuple[str, str]]:
    """Yield ``(url, html)`` for each URL in order.

    Args:
        urls: A ResultSet or any iterable of URLs
        config: Supplies the default delay, user agent and timeout
        session: Reuse an existing session instead of building one
        throttle_sec: Delay between consecutive requests, overrides config

    Raises:
        requests.HTTPError: On a non-2xx response. Nothing is retried.
    """
    config = config or LensConfig()
    if throttle_sec is None:
        throttle_sec = config.throttle_sec
    session = session or build_session(config)

    for index, url in enumerate(urls):
        if index and throttle_sec > 0:
            logger.debug(f"Sleeping {throttle_sec}s before page {index}")
            time.sleep(throttle_sec)
        logger.info(f"Fetching {url}")
        resp = session.get(url)
        resp.raise_for_status()
        yield url, resp.text


def save_pages(pages: Iterable[Tuple[str, str]], out_dir: Path) -> List[Path]:
    """Write each page to ``out_dir/page_<i>.html`` and return the paths."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for index, (url, html) in enumerate(pages):
        path = out_dir / f"page_{index}.html"
        path.write_text(html, encoding="utf-8")
        logger.debug(f"Saved {url} to {path}")
        written.append(path)
    return written
