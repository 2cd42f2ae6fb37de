# gplaces/common.py
"""Value types shared by the Places requests: coordinates, languages, filters."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


def format_number(value: float) -> str:
    """Locale-invariant fixed-point text: 500.0 -> "500", 500.5 -> "500.5", 1e-05 -> "0.00001"."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{format_number(self.latitude)},{format_number(self.longitude)}"

    @classmethod
    def parse(cls, text: str) -> "Location":
        """Parses "lat,lng" (as typed by a user) into a Location."""
        parts = [p.strip() for p in (text or "").split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Expected 'lat,lng', got {text!r}")
        return cls(latitude=float(parts[0]), longitude=float(parts[1]))


class Language(Enum):
    ARABIC = "ar"
    BASQUE = "eu"
    BENGALI = "bn"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_TRADITIONAL = "zh-TW"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_AUSTRALIAN = "en-AU"
    ENGLISH_GREAT_BRITAIN = "en-GB"
    FARSI = "fa"
    FILIPINO = "fil"
    FINNISH = "fi"
    FRENCH = "fr"
    GALICIAN = "gl"
    GERMAN = "de"
    GREEK = "el"
    GUJARATI = "gu"
    HEBREW = "iw"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KANNADA = "kn"
    KOREAN = "ko"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MALAYALAM = "ml"
    MARATHI = "mr"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt-BR"
    PORTUGUESE_PORTUGAL = "pt-PT"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    TAGALOG = "tl"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Language":
        wanted = (code or "").strip().lower()
        for language in cls:
            if language.value.lower() == wanted:
                return language
        raise ValueError(f"Unsupported language code: {code!r}")


class RestrictPlaceType(Enum):
    GEOCODE = "geocode"
    ADDRESS = "address"
    ESTABLISHMENT = "establishment"
    REGIONS = "regions"
    CITIES = "cities"
    AIRPORT = "airport"
    CAFE = "cafe"
    LODGING = "lodging"
    RESTAURANT = "restaurant"
    TRAIN_STATION = "train_station"

    def to_param(self) -> str:
        return _TYPE_PARAMS[self]


# Type collections are sent wrapped in parentheses; single types are sent bare.
_TYPE_PARAMS = {t: t.value for t in RestrictPlaceType}
_TYPE_PARAMS[RestrictPlaceType.CITIES] = "(cities)"
_TYPE_PARAMS[RestrictPlaceType.REGIONS] = "(regions)"


class Component(Enum):
    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"
