"""
Client for downloading and caching the eco.json opening data files.
"""
import json
import logging
import os
import time
from typing import List, Optional

import requests

logger = logging.getLogger(__name__)

ECO_FILES = ["ecoA.json", "ecoB.json", "ecoC.json", "ecoD.json", "ecoE.json"]


class EcoDataClient:
    """Client for the eco.json raw opening records."""

    BASE_URL = os.getenv(
        "ECO_BASE_URL",
        "https://raw.githubusercontent.com/hayatbiralem/eco.json/master",
    )
    RATE_LIMIT_DELAY = 0.1  # Delay between requests in seconds

    def __init__(self, cache_dir: str = "data/eco", base_url: Optional[str] = None):
        """
        Initialize the client.

        Args:
            cache_dir: Directory the JSON files are cached in
            base_url: Override for the download location
        """
        self.cache_dir = cache_dir
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        os.makedirs(cache_dir, exist_ok=True)
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'OpeningExplorer/1.0'
        })

    def _make_request(self, url: str) -> Optional[dict]:
        """Make an API request, returning None on any HTTP or network error."""
        time.sleep(self.RATE_LIMIT_DELAY)
        try:
            response = self.session.get(url, timeout=30)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            logger.warning(f"HTTP error fetching {url}: {e}")
            return None
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error fetching {url}: {str(e)}")
            return None
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            return None

    def cached_path(self, filename: str) -> str:
        return os.path.join(self.cache_dir, filename)

    def cached_files(self) -> List[str]:
        """Paths of the data files already cached, in load order."""
        return [
            self.cached_path(filename)
            for filename in ECO_FILES
            if os.path.isfile(self.cached_path(filename))
        ]

    def download_file(self, filename: str, force: bool = False) -> Optional[str]:
        """Download one data file into the cache. Returns its path, or None on failure."""
        path = self.cached_path(filename)
        if os.path.isfile(path) and not force:
            return path

        data = self._make_request(f"{self.base_url}/{filename}")
        if not isinstance(data, dict):
            if data is not None:
                logger.warning(f"Skipping {filename}: expected an object keyed by position")
            return None

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        logger.info(f"Cached {len(data)} records to {path}")
        return path

    def download_all(self, force: bool = False) -> List[str]:
        """Download every data file, returning the paths that are now cached."""
        paths = []
        for filename in ECO_FILES:
            path = self.download_file(filename, force=force)
            if path:
                paths.append(path)
        return paths
