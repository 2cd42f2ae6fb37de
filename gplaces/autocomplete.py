# gplaces/autocomplete.py
from typing import Dict, Iterable, List, Optional

from .autocomplete_request import PlaceAutoCompleteRequest
from .base_request import BasePlacesRequest
from .common import Location, RestrictPlaceType
from .config import Settings
from .errors import MissingRequiredField, PlacesApiError
from .http_client import HttpClient
from .logger import get_logger
from .responses import AutocompleteResponse

logger = get_logger(__name__)

DETAILS_FIELDS = "formatted_address,address_component,geometry"


def base_request(settings: Settings) -> BasePlacesRequest:
    return BasePlacesRequest(key=settings.api_key, base_url=settings.places_base_url)


def autocomplete(client: HttpClient, request: PlaceAutoCompleteRequest) -> AutocompleteResponse:
    """Runs a Place Autocomplete request. Validation errors surface before any HTTP call."""
    params = request.flatten()
    data = client.get_json(request.url, params=params)
    response = AutocompleteResponse.from_dict(data)

    if not response.ok:
        # Common: OVER_QUERY_LIMIT, REQUEST_DENIED, INVALID_REQUEST
        raise PlacesApiError("Autocomplete", response.status, response.error_message)

    logger.info("Autocomplete returned %d predictions (status=%s)", len(response.predictions), response.status)
    return response


def get_address_suggestions(
    client: HttpClient,
    settings: Settings,
    user_input: str,
    limit: Optional[int] = None,
    session_token: Optional[str] = None,
    location: Optional[Location] = None,
    radius: Optional[float] = None,
    types: Iterable[RestrictPlaceType] = (RestrictPlaceType.GEOCODE,),  # addresses + cities
) -> List[Dict]:
    """Returns predictions with description + place_id (at most settings.max_suggestions by default)."""
    if limit is None:
        limit = settings.max_suggestions
    request = PlaceAutoCompleteRequest(
        input=user_input,
        session_token=session_token,
        location=location,
        radius=radius,
        language=settings.language,
        types=list(types),
        base=base_request(settings),
    )
    response = autocomplete(client, request)
    return [
        {"description": p.description, "place_id": p.place_id}
        for p in response.predictions[:limit]
    ]


def get_place_details(
    client: HttpClient,
    settings: Settings,
    place_id: str,
    session_token: Optional[str] = None,
    fields: str = DETAILS_FIELDS,
) -> Dict:
    """
    Place Details for a selected suggestion (formatted address + components + geometry).
    Passing the autocomplete session token ends that billing session.
    """
    if not place_id:
        raise MissingRequiredField("place_id")

    base = base_request(settings)
    params = base.flatten()
    params.append(("place_id", place_id))
    params.append(("fields", fields))
    params.append(("language", settings.language.code))
    if session_token:
        params.append(("sessiontoken", session_token))

    data = client.get_json(base.endpoint("details/json"), params=params)
    status = data.get("status")
    if status != "OK":
        raise PlacesApiError(f"Place Details for {place_id}", status, data.get("error_message"))
    return data.get("result", {}) or {}
