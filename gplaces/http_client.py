# gplaces/http_client.py
import time
from typing import Any, Dict, Sequence, Tuple

import requests

from .logger import get_logger

logger = get_logger(__name__)


class HttpClient:
    def __init__(self, timeout_sec: int, sleep_sec: float = 0.0):
        self.timeout_sec = timeout_sec
        self.sleep_sec = sleep_sec

    def get_json(self, url: str, params: Sequence[Tuple[str, str]]) -> Dict[str, Any]:
        # pairs keep their order on the wire; only names are logged (the key is a secret)
        logger.info("GET %s params=%s", url, [name for name, _ in params])
        resp = requests.get(url, params=list(params), timeout=self.timeout_sec)
        resp.raise_for_status()
        if self.sleep_sec:
            time.sleep(self.sleep_sec)
        return resp.json()
