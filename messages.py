"""
Message catalog for the snow day page.

Strings are looked up by (language, key); language never changes what the
calculator does, only what the user reads.
"""

from datetime import datetime
from typing import Dict, List

DEFAULT_LANGUAGE = 'en'

LANGUAGES: Dict[str, str] = {
    'en': 'English',
    'hi': 'हिन्दी',
}

MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        'title': 'Snow Day Predictor',
        'prompt': 'Enter a city, postal code, or "city,country"',
        'placeholder': 'e.g. Shimla',
        'check': 'Check ❄️',
        'loading': 'Loading...',
        'chance_label': 'Chance of school closing',
        'snow': 'Snow',
        'temperature': 'Temperature',
        'wind': 'Wind',
        'humidity': 'Humidity',
        'feels_like': 'Feels like',
        'conditions': 'Conditions',
        'checked': 'Checked {date}',
        'favorites': 'Favorites',
        'no_favorites': 'No favorites yet.',
        'add_favorite': 'Add to favorites ⭐',
        'already_favorite': '{city} is in your favorites',
        'share': 'Share',
        'share_text': '{chance}% chance of a snow day in {city} ({likelihood}). Check yours: {url}',
        'language': 'Language',
        'footer': 'Built with the OpenWeatherMap API',
        'empty_input': 'Please enter a city name',
        'auth_error': 'The weather service rejected the API key',
        'not_found': 'City not found: {query}',
        'provider_error': 'Weather service error: {message}',
        'generic_error': 'Something went wrong, please try again',
        'very_unlikely': 'Very unlikely',
        'unlikely': 'Unlikely',
        'possible': 'Possible',
        'likely': 'Likely',
        'very_likely': 'Very likely',
    },
    'hi': {
        'title': 'स्नो डे प्रेडिक्टर',
        'prompt': 'शहर, पिन कोड या "शहर,देश" दर्ज करें',
        'placeholder': 'शहर टाइप करें, जैसे: शिमला',
        'check': 'चेक करें ❄️',
        'loading': 'लोड हो रहा है...',
        'chance_label': 'स्कूल बंद होने की संभावना',
        'snow': 'बर्फ़',
        'temperature': 'तापमान',
        'wind': 'हवा',
        'humidity': 'नमी',
        'feels_like': 'महसूस होता है',
        'conditions': 'मौसम',
        'checked': 'जाँच का समय {date}',
        'favorites': 'पसंदीदा',
        'no_favorites': 'अभी कोई पसंदीदा नहीं।',
        'add_favorite': 'पसंदीदा में जोड़ें ⭐',
        'already_favorite': '{city} आपके पसंदीदा में है',
        'share': 'शेयर करें',
        'share_text': '{city} में स्नो डे की संभावना {chance}% ({likelihood})। अपना देखें: {url}',
        'language': 'भाषा',
        'footer': 'OpenWeatherMap API का उपयोग करके बनाया गया',
        'empty_input': 'कृपया शहर का नाम दर्ज करें',
        'auth_error': 'मौसम सेवा ने API कुंजी अस्वीकार कर दी',
        'not_found': 'शहर नहीं मिला: {query}',
        'provider_error': 'मौसम सेवा त्रुटि: {message}',
        'generic_error': 'कुछ गलत हुआ, कृपया दोबारा कोशिश करें',
        'very_unlikely': 'बहुत कम संभावना',
        'unlikely': 'कम संभावना',
        'possible': 'संभव',
        'likely': 'संभावित',
        'very_likely': 'बहुत संभावित',
    },
}

DATE_FORMATS: Dict[str, str] = {
    'en': '%b %d, %Y %I:%M %p',
    'hi': '%d/%m/%Y %H:%M',
}


def supported_languages() -> List[str]:
    return list(LANGUAGES)


def normalize_language(lang: str) -> str:
    lang = (lang or '').strip().lower()
    return lang if lang in MESSAGES else DEFAULT_LANGUAGE


def t(lang: str, key: str, **kwargs) -> str:
    """Localized message for key, falling back to English when missing."""
    catalog = MESSAGES.get(lang, MESSAGES[DEFAULT_LANGUAGE])
    template = catalog.get(key, MESSAGES[DEFAULT_LANGUAGE].get(key, key))
    return template.format(**kwargs) if kwargs else template


def format_checked_date(dt: datetime, lang: str) -> str:
    return dt.strftime(DATE_FORMATS.get(lang, DATE_FORMATS[DEFAULT_LANGUAGE]))
