from __future__ import annotations

import pandas as pd

from gplaces.exporters import export_predictions_csv, predictions_frame
from gplaces.responses import Prediction, parse_components


def test_export_predictions_csv(tmp_path):
    predictions = [
        Prediction.from_dict({
            "description": "Sicily, Italy",
            "place_id": "ChIJ-sicily",
            "types": ["political", "geocode"],
            "structured_formatting": {"main_text": "Sicily", "secondary_text": "Italy"},
        })
    ]
    out = tmp_path / "predictions.csv"

    export_predictions_csv(predictions, str(out))

    df = pd.read_csv(out)
    assert list(df.columns) == ["description", "place_id", "main_text", "secondary_text", "types", "distance_meters"]
    assert df.loc[0, "types"] == "political,geocode"


def test_empty_frame_keeps_columns():
    assert list(predictions_frame([]).columns)[:2] == ["description", "place_id"]


def test_parse_components():
    comp = parse_components([
        {"long_name": "Mountain View", "short_name": "Mountain View", "types": ["locality", "political"]},
        {"long_name": "California", "short_name": "CA", "types": ["administrative_area_level_1"]},
        {"long_name": "94043", "short_name": "94043", "types": ["postal_code"]},
        {"long_name": "United States", "short_name": "US", "types": ["country"]},
    ])
    assert comp == {"city": "Mountain View", "state": "CA", "zip": "94043", "country": "US"}
