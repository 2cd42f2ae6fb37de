# gplaces/responses.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SUCCESS_STATUSES = ("OK", "ZERO_RESULTS")


@dataclass(frozen=True)
class Term:
    offset: int
    value: str


@dataclass(frozen=True)
class MatchedSubstring:
    offset: int
    length: int


@dataclass(frozen=True)
class StructuredFormatting:
    main_text: Optional[str] = None
    secondary_text: Optional[str] = None


@dataclass(frozen=True)
class Prediction:
    description: Optional[str]
    place_id: Optional[str]
    reference: Optional[str] = None
    types: List[str] = field(default_factory=list)
    terms: List[Term] = field(default_factory=list)
    matched_substrings: List[MatchedSubstring] = field(default_factory=list)
    structured_formatting: StructuredFormatting = field(default_factory=StructuredFormatting)
    distance_meters: Optional[int] = None

    @classmethod
    def from_dict(cls, p: Dict[str, Any]) -> "Prediction":
        fmt = p.get("structured_formatting", {}) or {}
        return cls(
            description=p.get("description"),
            place_id=p.get("place_id"),
            reference=p.get("reference"),
            types=list(p.get("types", []) or []),
            terms=[Term(offset=t.get("offset", 0), value=t.get("value", "")) for t in p.get("terms", []) or []],
            matched_substrings=[
                MatchedSubstring(offset=m.get("offset", 0), length=m.get("length", 0))
                for m in p.get("matched_substrings", []) or []
            ],
            structured_formatting=StructuredFormatting(
                main_text=fmt.get("main_text"),
                secondary_text=fmt.get("secondary_text"),
            ),
            distance_meters=p.get("distance_meters"),
        )

    def to_row(self) -> Dict[str, Any]:
        """Flat row for CSV export."""
        return {
            "description": self.description,
            "place_id": self.place_id,
            "main_text": self.structured_formatting.main_text,
            "secondary_text": self.structured_formatting.secondary_text,
            "types": ",".join(self.types),
            "distance_meters": self.distance_meters,
        }


@dataclass(frozen=True)
class AutocompleteResponse:
    status: Optional[str]
    predictions: List[Prediction] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in SUCCESS_STATUSES

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AutocompleteResponse":
        return cls(
            status=data.get("status"),
            predictions=[Prediction.from_dict(p) for p in data.get("predictions", []) or []],
            error_message=data.get("error_message"),
        )


def parse_components(address_components: list) -> dict:
    """
    Extracts city/state/zip/country from a Place Details address_components list.
    """
    out = {"city": None, "state": None, "zip": None, "country": None}
    for c in address_components or []:
        types = c.get("types", [])
        if "locality" in types:
            out["city"] = c.get("long_name")
        if "administrative_area_level_1" in types:
            out["state"] = c.get("short_name")
        if "postal_code" in types:
            out["zip"] = c.get("long_name")
        if "country" in types:
            out["country"] = c.get("short_name")
    return out
