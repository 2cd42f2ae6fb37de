# gplaces/exporters.py
import os
from typing import List

import pandas as pd

from .responses import Prediction


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def predictions_frame(predictions: List[Prediction]) -> pd.DataFrame:
    return pd.DataFrame(
        [p.to_row() for p in predictions],
        columns=["description", "place_id", "main_text", "secondary_text", "types", "distance_meters"],
    )


def export_predictions_csv(predictions: List[Prediction], out_path: str) -> None:
    predictions_frame(predictions).to_csv(out_path, index=False)
