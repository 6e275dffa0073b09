import copy
import os

import pytest

# Minimal env so pydantic-settings doesn't require a real .env file
os.environ.setdefault("APIXU_API_KEY", "test-key")


GOOD_PAYLOAD = {
    "location": {
        "name": "Greenville",
        "region": "South Carolina",
        "country": "USA",
        "lat": 34.85,
        "lon": -82.4,
        "tz_id": "America/New_York",
        "localtime_epoch": 1544846105,
        "localtime": "2018-12-14 22:55",
    },
    "current": {
        "last_updated_epoch": 1544845514,
        "last_updated": "2018-12-14 22:45",
        "temp_c": 8.9,
        "temp_f": 48.0,
        "is_day": 0,
        "condition": {
            "text": "Light rain",
            "icon": "//cdn.apixu.com/weather/64x64/night/296.png",
            "code": 1183,
        },
        "wind_mph": 11.9,
        "wind_kph": 19.1,
        "wind_degree": 40,
        "wind_dir": "NE",
        "pressure_mb": 1016.0,
        "pressure_in": 30.5,
        "precip_mm": 2.0,
        "precip_in": 0.08,
        "humidity": 96,
        "cloud": 100,
        "feelslike_c": 5.7,
        "feelslike_f": 42.2,
        "vis_km": 8.0,
        "vis_miles": 4.0,
        "uv": 0.0,
    },
}


@pytest.fixture()
def good_payload():
    return copy.deepcopy(GOOD_PAYLOAD)
