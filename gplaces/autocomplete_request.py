# gplaces/autocomplete_request.py
from collections import abc
from dataclasses import dataclass, field
from typing import Collection, Optional, Sequence, Tuple

from .base_request import BasePlacesRequest, QueryParams
from .common import Component, Language, Location, RestrictPlaceType, format_number
from .errors import MissingRequiredField, OutOfRange

MIN_RADIUS_M = 1
MAX_RADIUS_M = 50_000

_DECLARED_TYPES = list(RestrictPlaceType)


@dataclass
class PlaceAutoCompleteRequest:
    """
    Place Autocomplete query: returns candidate places for partial text input.

    Fields are plain attributes and are only checked by flatten(), so a request
    can be built up step by step (e.g. from form inputs) and validated once.

    - offset: caret position in `input`; with input 'Googl' and offset 3 the
      service matches on 'Goo'. Omit to use the whole term.
    - session_token: groups a user's keystrokes and the final details lookup
      into one billed session.
    - location / radius: bias results toward a circle (radius in meters).
    - strict_bounds: only return places inside location/radius.
    - types: restrict result types; cities/regions are type collections.
    - components: (Component, value) filters, e.g. (Component.COUNTRY, "US").
    """

    input: Optional[str] = None
    offset: Optional[str] = None
    session_token: Optional[str] = None
    location: Optional[Location] = None
    radius: Optional[float] = None
    strict_bounds: bool = False
    language: Optional[Language] = Language.ENGLISH
    types: Optional[Collection[RestrictPlaceType]] = None
    components: Optional[Sequence[Tuple[Component, str]]] = None
    base: BasePlacesRequest = field(default_factory=BasePlacesRequest)

    def __post_init__(self):
        # generators would be used up by the first flatten()
        if self.types is not None and not isinstance(self.types, abc.Collection):
            self.types = list(self.types)

    @property
    def url(self) -> str:
        return self.base.endpoint("autocomplete/json")

    def flatten(self) -> QueryParams:
        """Validates the request and returns its ordered query string pairs."""
        params = self.base.flatten()

        if not self.input:
            raise MissingRequiredField("input")

        if self.radius is not None and not (MIN_RADIUS_M <= self.radius <= MAX_RADIUS_M):
            raise OutOfRange("radius", MIN_RADIUS_M, MAX_RADIUS_M)

        params.append(("input", self.input))
        params.append(("language", (self.language or Language.ENGLISH).code))

        if self.offset:
            params.append(("offset", self.offset))

        if self.session_token:
            params.append(("sessiontoken", self.session_token))

        if self.location is not None:
            params.append(("location", str(self.location)))

        if self.radius is not None:
            params.append(("radius", format_number(self.radius)))

        if self.strict_bounds:
            params.append(("strictbounds", ""))

        types = list(self.types or [])
        if isinstance(self.types, (set, frozenset)):
            # sets iterate in hash order, which changes between processes
            types.sort(key=_DECLARED_TYPES.index)
        if types:
            params.append(("types", "|".join(t.to_param() for t in types)))

        components = list(self.components or [])
        if components:
            params.append(("components", "|".join(f"{kind.value}:{value}" for kind, value in components)))

        return params
