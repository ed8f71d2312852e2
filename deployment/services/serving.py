import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServingFailure:
    path: str
    url: str
    status_code: Optional[int] = None
    error: str = ''


def build_asset_url(base_url, static_url, relative_path):
    prefix = '/' + static_url.strip('/') + '/' if static_url.strip('/') else '/'
    return base_url.rstrip('/') + prefix + quote(relative_path.lstrip('/'))


def verify_static_serving(base_url, static_url, files, session=None, timeout=10):
    """Fetch every collected file through ``base_url`` and report the misses.

    A 404 here usually means the reverse proxy alias and STATIC_ROOT point at
    different directories. A session passed in is left open for the caller.
    """
    if session is None:
        with requests.Session() as owned:
            return _fetch_all(owned, base_url, static_url, files, timeout)
    return _fetch_all(session, base_url, static_url, files, timeout)


def _fetch_all(session, base_url, static_url, files, timeout):
    failures = []
    for relative_path in files:
        url = build_asset_url(base_url, static_url, relative_path)
        try:
            response = session.get(url, timeout=timeout)
        except requests.RequestException as e:
            logger.warning("Request for %s failed: %s", url, e)
            failures.append(ServingFailure(path=relative_path, url=url, error=str(e)))
            continue

        if response.status_code != 200:
            logger.warning("%s returned %s", url, response.status_code)
            failures.append(
                ServingFailure(path=relative_path, url=url, status_code=response.status_code)
            )
    return failures
