from types import MappingProxyType
from typing import Any, Mapping

from apixu_weather.models import Condition


# Apixu condition codes. Several fine-grained codes collapse onto one Condition.
CONDITIONS: Mapping[str, Condition] = MappingProxyType(
    {
        "1000": Condition.CLEAR,  # Sunny / Clear
        "1003": Condition.PARTLY_CLOUDY,
        "1006": Condition.CLOUDY,
        "1009": Condition.OVERCAST,
        "1030": Condition.MIST,
        "1063": Condition.RAIN,  # Patchy rain possible
        "1066": Condition.SNOW,
        "1069": Condition.SLEET,
        "1072": Condition.DRIZZLE,  # Patchy freezing drizzle possible
        "1087": Condition.THUNDERSTORM,
        "1114": Condition.SNOW,  # Blowing snow
        "1117": Condition.SNOW,  # Blizzard
        "1135": Condition.FOG,
        "1147": Condition.FOG,  # Freezing fog
        "1150": Condition.DRIZZLE,
        "1153": Condition.DRIZZLE,
        "1168": Condition.DRIZZLE,
        "1171": Condition.DRIZZLE,
        "1180": Condition.RAIN,
        "1183": Condition.RAIN,
        "1186": Condition.RAIN,
        "1189": Condition.RAIN,
        "1192": Condition.RAIN,
        "1195": Condition.RAIN,
        "1198": Condition.RAIN,  # Light freezing rain
        "1201": Condition.RAIN,
        "1204": Condition.SLEET,
        "1207": Condition.SLEET,
        "1210": Condition.SNOW,
        "1213": Condition.SNOW,
        "1216": Condition.SNOW,
        "1219": Condition.SNOW,
        "1222": Condition.SNOW,
        "1225": Condition.SNOW,
        "1237": Condition.HAIL,  # Ice pellets
        "1240": Condition.RAIN,
        "1243": Condition.RAIN,
        "1246": Condition.RAIN,
        "1249": Condition.SLEET,
        "1252": Condition.SLEET,
        "1255": Condition.SNOW,
        "1258": Condition.SNOW,
        "1261": Condition.HAIL,
        "1264": Condition.HAIL,
        "1273": Condition.THUNDERSTORM,
        "1276": Condition.THUNDERSTORM,
        "1279": Condition.SNOW,  # Patchy light snow with thunder
        "1282": Condition.SNOW,
    }
)


def condition_for(code: Any) -> Condition:
    """Look up an Apixu condition code, falling back to Condition.UNKNOWN."""
    if isinstance(code, int) and not isinstance(code, bool):
        code = str(code)
    if not isinstance(code, str):
        return Condition.UNKNOWN
    return CONDITIONS.get(code.strip(), Condition.UNKNOWN)
