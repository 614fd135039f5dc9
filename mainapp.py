import logging
import re
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict, Optional
from urllib.parse import urlencode

import requests

from config import Settings
from messages import format_checked_date, t

logger = logging.getLogger(__name__)

POSTAL_RE = re.compile(r'^[0-9]{3,10}$')
INDIAN_PIN_RE = re.compile(r'^[1-9][0-9]{5}$')

# Snow day thresholds (metric units)
SNOW_THRESHOLD_CM = 5
TEMP_THRESHOLD_C = -5
WIND_THRESHOLD_MS = 14


# -------------------------
# Errors
# -------------------------

class WeatherLookupError(LookupError):
    """Base class for every failure surfaced to the page."""

    def __init__(self, message: str, query: str = '', code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.query = query
        self.code = code


class EmptyInputError(WeatherLookupError):
    pass


class AuthError(WeatherLookupError):
    pass


class NotFoundError(WeatherLookupError):
    pass


class GenericError(WeatherLookupError):
    pass


# -------------------------
# Data
# -------------------------

@dataclass
class RequestParams:
    query: str
    is_postal: bool
    name: str
    country: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        """Provider query parameters (location part only)."""
        if self.is_postal:
            return {'zip': f"{self.name},{self.country}"}
        if self.country:
            return {'q': f"{self.name},{self.country}"}
        return {'q': self.name}


@dataclass
class WeatherObservation:
    temperature: float
    wind_speed: float
    humidity: float
    feels_like: float
    snow_1h: float
    weather_main: str
    city_name: str


@dataclass
class Prediction:
    chance: int
    likelihood: str
    temperature: float
    wind_speed: float
    humidity: float
    feels_like: float
    snow_1h: float
    weather_main: str
    city_name: str
    checked_date: str

    def to_dict(self) -> Dict:
        return asdict(self)


# -------------------------
# Location parsing
# -------------------------

def infer_country(code: str) -> str:
    """Six digits without a leading zero is an Indian PIN; anything else is a US ZIP."""
    return 'IN' if INDIAN_PIN_RE.match(code) else 'US'


def parse_location(text: str, lang: str = 'en') -> RequestParams:
    """
    Classify raw user input as a postal code or a city query.

    "75001,FR" -> zip=75001,FR
    "London,UK" -> q=London,UK
    "814146" -> zip=814146,IN

    A bare 3-10 digit string is always a postal code, even when a place
    with that name exists.
    """
    query = (text or '').strip()
    if not query:
        raise EmptyInputError(t(lang, 'empty_input'), query=query)

    name = query
    country = None
    if ',' in query:
        name, country = (part.strip() for part in query.split(',', 1))
        country = country.upper() or None

    candidate = name if country else query
    if POSTAL_RE.match(candidate):
        return RequestParams(query=query, is_postal=True, name=candidate,
                             country=country or infer_country(candidate))

    return RequestParams(query=query, is_postal=False, name=name, country=country)


# -------------------------
# Weather fetch
# -------------------------

def _response_code(data: Dict, status_code: int) -> int:
    cod = data.get('cod', status_code)
    try:
        return int(cod)
    except (TypeError, ValueError):
        return status_code


def _raise_for_code(code: int, data: Dict, query: str, lang: str):
    if code == 401:
        raise AuthError(t(lang, 'auth_error'), query=query, code=code)
    if code == 404:
        raise NotFoundError(t(lang, 'not_found', query=query), query=query, code=code)
    provider_message = data.get('message') or t(lang, 'generic_error')
    raise GenericError(t(lang, 'provider_error', message=provider_message), query=query, code=code)


def extract_observation(data: Dict) -> WeatherObservation:
    """Pull the fields the formula and the result card need from a 200 response."""
    snow = data.get('snow') or {}
    return WeatherObservation(
        temperature=data['main']['temp'],
        wind_speed=data['wind']['speed'],
        humidity=data['main']['humidity'],
        feels_like=data['main']['feels_like'],
        snow_1h=snow.get('1h', 0) or 0,
        weather_main=data['weather'][0]['main'],
        city_name=data['name'],
    )


def fetch_observation(params: RequestParams, settings: Optional[Settings] = None,
                      lang: str = 'en') -> WeatherObservation:
    """
    One GET against /data/2.5/weather. No retries: any failure is raised
    straight to the caller as a WeatherLookupError subtype.
    """
    settings = settings or Settings.load()
    url = f"{settings.weather_base_url.rstrip('/')}/data/2.5/weather"
    query_params = dict(params.to_params(), units='metric', appid=settings.weather_api_key)

    logger.info("Looking up weather for %r (%s)", params.query, 'zip' if params.is_postal else 'q')
    try:
        response = requests.get(url, params=query_params, timeout=settings.request_timeout)
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.exception("Weather request failed for %r", params.query)
        raise GenericError(t(lang, 'generic_error'), query=params.query) from e

    if not isinstance(data, dict):
        raise GenericError(t(lang, 'generic_error'), query=params.query, code=response.status_code)

    code = _response_code(data, response.status_code)
    if not response.ok or code != 200:
        logger.warning("Provider rejected %r: cod=%s message=%r", params.query, code, data.get('message'))
        _raise_for_code(code, data, params.query, lang)

    try:
        return extract_observation(data)
    except (KeyError, IndexError, TypeError) as e:
        logger.warning("Incomplete provider response for %r: missing %s", params.query, e)
        raise GenericError(t(lang, 'generic_error'), query=params.query, code=code) from e


# -------------------------
# Prediction
# -------------------------

def predict(observation: WeatherObservation) -> int:
    """Additive snow day chance, capped at 100."""
    chance = 0
    if observation.snow_1h > SNOW_THRESHOLD_CM:
        chance += 70
    if observation.temperature < TEMP_THRESHOLD_C:
        chance += 20
    if observation.wind_speed > WIND_THRESHOLD_MS:
        chance += 10
    return min(chance, 100)


def likelihood_key(chance: int) -> str:
    if chance < 15:
        return 'very_unlikely'
    elif chance < 35:
        return 'unlikely'
    elif chance < 55:
        return 'possible'
    elif chance < 75:
        return 'likely'
    return 'very_likely'


def build_prediction(observation: WeatherObservation, lang: str = 'en',
                     checked_at: Optional[datetime] = None) -> Prediction:
    chance = predict(observation)
    return Prediction(
        chance=chance,
        likelihood=t(lang, likelihood_key(chance)),
        checked_date=format_checked_date(checked_at or datetime.now(), lang),
        **asdict(observation),
    )


def resolve_and_fetch(text: str, lang: str = 'en', settings: Optional[Settings] = None) -> Prediction:
    """Parse, fetch and score a single lookup. Raises WeatherLookupError on failure."""
    params = parse_location(text, lang)
    observation = fetch_observation(params, settings, lang)
    prediction = build_prediction(observation, lang)
    logger.info("%s: chance=%d%% (snow=%s temp=%s wind=%s)", prediction.city_name,
                prediction.chance, observation.snow_1h, observation.temperature, observation.wind_speed)
    return prediction


# -------------------------
# Sharing
# -------------------------

def build_share_url(base_url: str, city: str, lang: str = 'en') -> str:
    """Link that reopens the page and runs the same lookup."""
    return f"{base_url.rstrip('/')}/?{urlencode({'city': city, 'lang': lang})}"


def build_share_text(prediction: Prediction, lang: str = 'en', base_url: str = '') -> str:
    url = build_share_url(base_url, prediction.city_name, lang) if base_url else ''
    return t(lang, 'share_text', chance=prediction.chance, city=prediction.city_name,
             likelihood=prediction.likelihood, url=url).strip()


# -------------------------
# Calculator
# -------------------------

class SnowDayCalculator:
    """
    Snow Day Calculator using OpenWeatherMap current conditions.

    Accepts a city name, a postal code, or "city,country"; the formula only
    looks at the last hour of snow, the temperature and the wind speed.
    """

    def __init__(self, query: str, lang: str = 'en', settings: Optional[Settings] = None):
        self.query = query
        self.lang = lang
        self.settings = settings or Settings.load()

        self.params = None
        self.observation = None
        self.error = None

    def parse(self) -> RequestParams:
        self.params = parse_location(self.query, self.lang)
        return self.params

    def fetch_weather_data(self) -> WeatherObservation:
        if self.params is None:
            self.parse()
        self.observation = fetch_observation(self.params, self.settings, self.lang)
        return self.observation

    def calculate(self) -> Dict:
        """Run the lookup and wrap the outcome in a result envelope."""
        timestamp = datetime.now().strftime('%Y-%m-%d %I:%M %p')
        try:
            self.fetch_weather_data()
        except WeatherLookupError as e:
            self.error = e
            return {
                'success': False,
                'error': e.message,
                'error_type': type(e).__name__,
                'prediction': None,
                'timestamp': timestamp,
            }

        prediction = build_prediction(self.observation, self.lang)
        return {
            'success': True,
            'error': None,
            'error_type': None,
            'prediction': prediction.to_dict(),
            'timestamp': timestamp,
        }


def get_snow_day_prediction(query: str, lang: str = 'en') -> Dict:
    """
    Get the snow day chance for a location.

    Args:
        query: city name, postal code, or "city,country"
        lang: 'en' or 'hi'

    Returns:
        Result envelope with 'success', 'error' and 'prediction'
    """
    calculator = SnowDayCalculator(query, lang)
    return calculator.calculate()
