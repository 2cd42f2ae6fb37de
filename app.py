# app.py
import uuid

import requests
import streamlit as st

from gplaces.autocomplete import autocomplete, base_request, get_place_details
from gplaces.autocomplete_request import MAX_RADIUS_M, PlaceAutoCompleteRequest
from gplaces.common import Component, Location, RestrictPlaceType
from gplaces.config import load_settings
from gplaces.errors import PlacesApiError
from gplaces.exporters import predictions_frame
from gplaces.http_client import HttpClient
from gplaces.responses import parse_components

# -------------------------
# Streamlit page setup
# -------------------------
st.set_page_config(page_title="Google Places Autocomplete", layout="wide")
st.title("Google Places Autocomplete")

try:
    settings = load_settings()
except ValueError as e:
    st.error(str(e))
    st.stop()

client = HttpClient(timeout_sec=settings.timeout_sec, sleep_sec=settings.sleep_between_requests_sec)

# -------------------------
# Session state: one token per autocomplete session
# -------------------------
if "session_token" not in st.session_state:
    st.session_state.session_token = uuid.uuid4().hex

col_reset, col_spacer = st.columns([1, 5])
with col_reset:
    if st.button("Reset / New Session"):
        st.session_state.session_token = uuid.uuid4().hex
        st.rerun()

# -------------------------
# UI Inputs
# -------------------------
user_input = st.text_input("Search text", "Sicili")

with st.expander("Location bias and filters"):
    center = st.text_input("Center (lat,lng)", "")
    radius_m = st.number_input("Radius (meters, 0 = none)", min_value=0, max_value=MAX_RADIUS_M, value=0, step=100)
    strict_bounds = st.checkbox("Only return results inside the radius", value=False)
    types = st.multiselect(
        "Types",
        options=list(RestrictPlaceType),
        format_func=lambda t: t.to_param(),
    )
    country = st.text_input("Country filter (ISO code, blank = any)", "")

st.caption("Tip: Type at least 3 characters to see suggestions. Selecting one resolves the full address.")

predictions = []

if user_input and len(user_input.strip()) >= 3:
    try:
        request = PlaceAutoCompleteRequest(
            input=user_input.strip(),
            session_token=st.session_state.session_token,
            location=Location.parse(center) if center.strip() else None,
            radius=radius_m or None,
            strict_bounds=strict_bounds,
            language=settings.language,
            types=types,
            components=[(Component.COUNTRY, country.strip())] if country.strip() else None,
            base=base_request(settings),
        )
        predictions = autocomplete(client, request).predictions[: settings.max_suggestions]
    except ValueError as e:
        st.warning(f"Invalid request: {e}")
    except (PlacesApiError, requests.RequestException) as e:
        st.warning(f"Autocomplete unavailable: {e}")

if predictions:
    index = st.selectbox(
        "Select the best match",
        options=range(len(predictions)),
        format_func=lambda i: predictions[i].description or "",
        key="prediction_selectbox",
    )
    selected = predictions[index]

    if selected and selected.place_id and st.button("Resolve selection"):
        try:
            resolved = get_place_details(
                client, settings, selected.place_id, session_token=st.session_state.session_token
            )
        except (PlacesApiError, requests.RequestException) as e:
            st.error(f"Could not resolve selection: {e}")
            st.stop()

        loc = (resolved.get("geometry") or {}).get("location") or {}
        comp = parse_components(resolved.get("address_components", []))
        st.success(
            f"Resolved Address: {resolved.get('formatted_address')} | "
            f"Lat/Lon: {loc.get('lat')}, {loc.get('lng')} | "
            f"City: {comp.get('city')} | State: {comp.get('state')} | ZIP: {comp.get('zip')}"
        )
        # the details call closes the billing session
        st.session_state.session_token = uuid.uuid4().hex

    df = predictions_frame(predictions)
    st.dataframe(df, use_container_width=True)
    st.download_button(
        "Download predictions.csv",
        df.to_csv(index=False).encode("utf-8"),
        "predictions.csv",
        "text/csv",
    )
elif user_input and len(user_input.strip()) >= 3:
    st.info("No predictions. Try different text or remove filters.")
