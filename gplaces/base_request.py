# gplaces/base_request.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import MissingRequiredField

PLACES_BASE_URL = "https://maps.googleapis.com/maps/api/place/"

QueryParams = List[Tuple[str, str]]


@dataclass
class BasePlacesRequest:
    """Parameters every Places web service call carries (API key + endpoint root)."""

    key: Optional[str] = None
    base_url: str = PLACES_BASE_URL

    @property
    def url(self) -> str:
        return self.base_url

    def endpoint(self, path: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return base + path

    def flatten(self) -> QueryParams:
        if not self.key:
            raise MissingRequiredField("key")
        return [("key", self.key)]
