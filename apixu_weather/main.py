from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from apixu_weather.config import settings
from apixu_weather.errors import ErrorKind, WeatherError
from apixu_weather.logging_config import setup_logging
from apixu_weather.models import Weather, WeatherProvider
from apixu_weather.services.apixu import ApixuProvider

setup_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

provider = ApixuProvider(
    api_key=settings.apixu_api_key,
    base_url=settings.apixu_base_url,
    timeout_seconds=settings.request_timeout_seconds,
)

_STATUS_FOR_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.QUOTA_EXCEEDED: 503,
    ErrorKind.TRANSPORT_ERROR: 504,
}


@app.get("/health")
def health():
    return {"status": "ok", "service": settings.app_name}


@app.get("/")
def root():
    return JSONResponse({"service": settings.app_name, "docs": "/docs"})


@app.get("/v1/weather/current", response_model=Weather)
async def current_weather(
    q: str = Query(..., min_length=1, description="Zip, city, 'lat,lon', 'metar:EGLL', 'iata:DXB', IP or 'auto:ip'"),
):
    try:
        located: WeatherProvider = provider.query(q)
        return await located.get_weather()
    except WeatherError as exc:
        raise HTTPException(
            status_code=_STATUS_FOR_KIND.get(exc.kind, 502),
            detail={"kind": exc.kind.value, "message": exc.message},
        )
