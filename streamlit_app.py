import streamlit as st

from config import Settings
from favorites import FavoritesStore, JsonFileStore
from logging_config import setup_logging
from mainapp import WeatherLookupError, build_share_text, resolve_and_fetch
from messages import LANGUAGES, normalize_language, t

st.set_page_config(page_title="Snow Day Predictor", page_icon="❄️")

settings = Settings.load()
setup_logging(settings.log_level)

if "favorites" not in st.session_state:
    st.session_state.favorites = FavoritesStore(JsonFileStore(settings.favorites_path))
    st.session_state.prediction = None
    st.session_state.error = None

# shared links look like ?city=Shimla&lang=hi
if "lang" not in st.session_state:
    st.session_state.lang = normalize_language(st.query_params.get("lang", settings.default_language))
if "shared_city" not in st.session_state:
    st.session_state.shared_city = st.query_params.get("city", "")
    if st.session_state.shared_city:
        st.session_state.query = st.session_state.shared_city
        st.session_state.pending_lookup = True

favorites = st.session_state.favorites


def run_lookup(query: str):
    st.session_state.prediction = None
    st.session_state.error = None
    try:
        st.session_state.prediction = resolve_and_fetch(query, st.session_state.lang, settings)
    except WeatherLookupError as e:
        st.session_state.error = e.message


def pick_favorite(name: str):
    st.session_state.query = name
    st.session_state.pending_lookup = True


def add_favorite():
    if st.session_state.prediction:
        favorites.add(st.session_state.prediction.city_name)


with st.sidebar:
    st.selectbox(t(st.session_state.lang, "language"), options=list(LANGUAGES),
                 format_func=LANGUAGES.get, key="lang")
    lang = st.session_state.lang

    st.subheader(t(lang, "favorites"))
    if len(favorites):
        for name in favorites.list():
            st.button(name, key=f"fav_{name}", on_click=pick_favorite, args=(name,))
    else:
        st.caption(t(lang, "no_favorites"))

st.title(t(lang, "title"))
st.write(t(lang, "prompt"))

st.text_input(t(lang, "prompt"), key="query", placeholder=t(lang, "placeholder"),
              label_visibility="collapsed")

pending = st.session_state.pop("pending_lookup", False)
if st.button(t(lang, "check"), key="check", type="primary") or pending:
    with st.spinner(t(lang, "loading")):
        run_lookup(st.session_state.get("query", ""))

if st.session_state.error:
    st.error(st.session_state.error)

prediction = st.session_state.prediction
if prediction:
    st.markdown(f"## {prediction.chance}%")
    st.markdown(f"**{t(lang, 'chance_label')}** · {prediction.likelihood} · {prediction.city_name}")

    col1, col2, col3 = st.columns(3)
    col1.metric(t(lang, "snow"), f"{prediction.snow_1h} cm")
    col2.metric(t(lang, "temperature"), f"{prediction.temperature}°C")
    col3.metric(t(lang, "wind"), f"{prediction.wind_speed} m/s")

    col1, col2, col3 = st.columns(3)
    col1.metric(t(lang, "humidity"), f"{prediction.humidity}%")
    col2.metric(t(lang, "feels_like"), f"{prediction.feels_like}°C")
    col3.metric(t(lang, "conditions"), prediction.weather_main)

    st.caption(t(lang, "checked", date=prediction.checked_date))

    if prediction.city_name in favorites:
        st.caption(t(lang, "already_favorite", city=prediction.city_name))
    else:
        st.button(t(lang, "add_favorite"), key="add_favorite", on_click=add_favorite)

    with st.expander(t(lang, "share")):
        # st.code renders a copy-to-clipboard button
        st.code(build_share_text(prediction, lang, settings.app_url), language=None)

st.caption(t(lang, "footer"))
