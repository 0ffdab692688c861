import logging

import pandas as pd
import requests
import streamlit as st

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = ["id", "name", "title", "image_url"]


class FetchError(RuntimeError):
    """The catalog could not be fetched or parsed."""


def catalog_url(cdn_base_url: str, version: str, locale: str) -> str:
    return f"{cdn_base_url.rstrip('/')}/{version}/data/{locale}/champion.json"


def image_url(cdn_base_url: str, version: str, filename: str) -> str:
    return f"{cdn_base_url.rstrip('/')}/{version}/img/champion/{filename}"


def build_catalog(payload, cdn_base_url: str, version: str) -> pd.DataFrame:
    """Turn a Data Dragon ``champion.json`` body into a DataFrame indexed by id."""
    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, dict):
        raise FetchError("catalog payload has no 'data' object")

    rows = []
    for key, champ in data.items():
        if not isinstance(champ, dict):
            continue
        cid = str(champ.get("id") or key)
        image = champ.get("image")
        full = image.get("full") if isinstance(image, dict) else None
        filename = str(full or f"{cid}.png")
        rows.append({
            "id": cid,
            "name": str(champ.get("name") or cid),
            "title": str(champ.get("title") or ""),
            "image_url": image_url(cdn_base_url, version, filename),
        })

    catalog = pd.DataFrame(rows, columns=CATALOG_COLUMNS)
    catalog = catalog.drop_duplicates(subset="id", keep="first").set_index("id", drop=False).rename_axis(None)
    return catalog.sort_index()


def fetch_catalog(cdn_base_url: str, version: str, locale: str, timeout: float = 10.0, session=None) -> pd.DataFrame:
    http = session or requests
    url = catalog_url(cdn_base_url, version, locale)
    logger.info("Fetching catalog from %s", url)
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise FetchError(f"HTTP error fetching {url}: {e}") from e
    except ValueError as e:
        raise FetchError(f"invalid JSON from {url}: {e}") from e

    catalog = build_catalog(payload, cdn_base_url, version)
    logger.info("Loaded %d catalog items (version %s)", len(catalog), version)
    return catalog


@st.cache_data(show_spinner="Loading champions...")
def load_catalog(cdn_base_url: str, version: str, locale: str, timeout: float) -> pd.DataFrame:
    return fetch_catalog(cdn_base_url, version, locale, timeout=timeout)
