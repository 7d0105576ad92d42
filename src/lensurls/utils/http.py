from __future__ import annotations

from typing import Optional

import requests

from ..config import LensConfig


def build_session(config: Optional[LensConfig] = None) -> requests.Session:
	"""Session carrying the configured User-Agent and a default timeout.

	No retry adapter is mounted: a failed page surfaces to the caller.
	"""
	config = config or LensConfig()
	s = requests.Session()
	s.headers.update({"User-Agent": config.user_agent, "Accept": "text/html,application/xhtml+xml,*/*"})
	s.request = _with_default_timeout(s.request, config.timeout_sec)
	return s


def _with_default_timeout(request_func, timeout_sec: int):
	def _wrapped(method, url, **kwargs):
		kwargs.setdefault("timeout", timeout_sec)
		return request_func(method, url, **kwargs)
	return _wrapped
