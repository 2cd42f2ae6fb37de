# gplaces/pipeline.py
import os
import uuid

from .autocomplete import autocomplete, base_request
from .autocomplete_request import PlaceAutoCompleteRequest
from .common import Location
from .config import load_settings
from .exporters import ensure_dir, export_predictions_csv
from .http_client import HttpClient


def run():
    settings = load_settings()
    client = HttpClient(timeout_sec=settings.timeout_sec, sleep_sec=settings.sleep_between_requests_sec)

    print("\n=== Google Places Autocomplete ===\n")
    text = input("Enter text to complete (example: 'Sicili'): ").strip()
    center = input("Bias toward 'lat,lng' (blank for none): ").strip()
    radius = input("Radius in meters (blank for none): ").strip()
    strict = input("Only results inside the radius? [y/N]: ").strip().lower() == "y"

    request = PlaceAutoCompleteRequest(
        input=text,
        session_token=uuid.uuid4().hex,
        location=Location.parse(center) if center else None,
        radius=float(radius) if radius else None,
        strict_bounds=strict,
        language=settings.language,
        base=base_request(settings),
    )

    response = autocomplete(client, request)
    predictions = response.predictions[: settings.max_suggestions]
    print(f"\n{len(predictions)} predictions (status={response.status}):\n")
    for i, p in enumerate(predictions, start=1):
        print(f" {i}. {p.description}  [{p.place_id}]")

    ensure_dir(settings.data_processed_dir)
    out_csv = os.path.join(settings.data_processed_dir, "predictions.csv")
    export_predictions_csv(predictions, out_csv)

    print("\n✅ Export complete:")
    print(f" - {out_csv}")


if __name__ == "__main__":
    run()
