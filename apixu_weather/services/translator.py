import math
from datetime import datetime, timezone
from typing import Any, Dict

from apixu_weather.errors import MalformedResponse
from apixu_weather.models import MS_PER_MPH, Weather, Wind
from apixu_weather.services.conditions import condition_for

ATTRIBUTION = "Apixu"


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


def mph_to_ms(value: float) -> float:
    return value * MS_PER_MPH


def _section(payload: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = payload.get(name)
    if not isinstance(value, dict):
        raise MalformedResponse(f"missing {name!r} object")
    return value


def _number(section: Dict[str, Any], field: str) -> float:
    value = section.get(field)
    # bool is an int subclass; a JSON true is never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponse(f"missing or non-numeric {field!r}")
    try:
        number = float(value)
    except OverflowError:
        raise MalformedResponse(f"{field!r} out of range") from None
    if not math.isfinite(number):
        raise MalformedResponse(f"{field!r} out of range")
    return number


def _integer(section: Dict[str, Any], field: str) -> int:
    value = section.get(field)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    value = _number(section, field)
    if not value.is_integer():
        raise MalformedResponse(f"{field!r} is not an integer")
    return int(value)


def _fraction(section: Dict[str, Any], field: str) -> float:
    percent = _number(section, field)
    if not 0 <= percent <= 100:
        raise MalformedResponse(f"{field!r} out of range: {percent}")
    return percent / 100


def _direction(section: Dict[str, Any], field: str) -> int:
    degrees = _integer(section, field)
    if not 0 <= degrees <= 360:
        raise MalformedResponse(f"{field!r} out of range: {degrees}")
    # 360 is north
    return degrees % 360


def _timestamp(section: Dict[str, Any], field: str) -> datetime:
    epoch = _integer(section, field)
    try:
        return datetime.fromtimestamp(epoch, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise MalformedResponse(f"{field!r} out of range") from None


def _condition_code(condition: Dict[str, Any]) -> str:
    code = condition.get("code")
    if isinstance(code, bool) or code is None:
        raise MalformedResponse("missing condition code")
    if isinstance(code, int):
        return str(code)
    if isinstance(code, str) and code.strip():
        return code.strip()
    raise MalformedResponse(f"invalid condition code: {code!r}")


def _location(payload: Dict[str, Any]) -> str:
    location = payload.get("location")
    if not isinstance(location, dict):
        return ""
    parts = (location.get(key) for key in ("name", "region", "country"))
    return ", ".join(part for part in parts if isinstance(part, str) and part)


def translate(payload: Any) -> Weather:
    """Build a Weather record from a successful current.json payload.

    Raises MalformedResponse when a required field is missing or has the
    wrong type; nothing is silently zeroed.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse("response body is not a JSON object")

    current = _section(payload, "current")
    condition = _section(current, "condition")
    description = condition.get("text")

    return Weather(
        location=_location(payload),
        condition=condition_for(_condition_code(condition)),
        description=description if isinstance(description, str) else "",
        humidity=_fraction(current, "humidity"),
        pressure_hpa=_number(current, "pressure_mb"),
        temperature_c=fahrenheit_to_celsius(_number(current, "temp_f")),
        wind=Wind(
            speed_ms=mph_to_ms(_number(current, "wind_mph")),
            direction=_direction(current, "wind_degree"),
        ),
        cloud_cover=_fraction(current, "cloud"),
        updated=_timestamp(current, "last_updated_epoch"),
        attribution=ATTRIBUTION,
    )
