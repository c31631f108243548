"""
Reference data loading for the front end.
Events, slides, tally and heritage are reloaded together on every view change.
"""
import json
import logging
from typing import Any, Callable, Dict, List
from urllib.parse import urljoin
from urllib.request import Request as UrlRequest, urlopen

from highlandgames.frontend.router import PageRouter, View

logger = logging.getLogger(__name__)

REFERENCE_ENDPOINTS = {
    'events': '/api/events',
    'slides': '/api/slides',
    'tally': '/api/tally',
    'heritage': '/api/heritage',
}

JsonFetcher = Callable[[str], Any]


def http_fetcher(base_url: str, timeout: int = 8) -> JsonFetcher:
    """Fetch JSON from a running server."""
    def fetch(path: str) -> Any:
        request = UrlRequest(urljoin(base_url, path), headers={'Accept': 'application/json'})
        with urlopen(request, timeout=timeout) as response:
            return json.loads(response.read().decode('utf-8'))
    return fetch


def flask_client_fetcher(client) -> JsonFetcher:
    """Fetch JSON through a Flask test client."""
    def fetch(path: str) -> Any:
        response = client.get(path)
        if response.status_code != 200:
            raise RuntimeError(f"GET {path} returned {response.status_code}")
        return response.get_json()
    return fetch


class ReferenceDataLoader:
    """
    Keeps the latest copy of the site's reference data.
    The four lists are replaced as one batch; if any fetch fails the previous
    batch is kept.
    """

    def __init__(self, fetch: JsonFetcher):
        self.fetch = fetch
        self.data: Dict[str, List[Any]] = {key: [] for key in REFERENCE_ENDPOINTS}
        self.loading = False
        self.load_count = 0

    def attach(self, router: PageRouter) -> None:
        """Reload after every transition, whatever the new view needs."""
        router.subscribe(self.on_view_change)

    def on_view_change(self, view: View) -> None:
        self.load()

    def load(self) -> bool:
        self.loading = True
        try:
            batch = {key: self.fetch(path) for key, path in REFERENCE_ENDPOINTS.items()}
        except Exception as e:
            logger.error("Reference data load failed: %s", e)
            return False
        finally:
            self.loading = False

        self.data = batch
        self.load_count += 1
        return True

    @property
    def events(self) -> List[Any]:
        return self.data['events']

    @property
    def slides(self) -> List[Any]:
        return self.data['slides']

    @property
    def tally(self) -> List[Any]:
        return self.data['tally']

    @property
    def heritage(self) -> List[Any]:
        return self.data['heritage']
