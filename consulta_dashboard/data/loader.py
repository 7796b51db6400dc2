import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
import streamlit as st

from consulta_dashboard.config import CACHE_TTL_SECONDS, DEFAULT_INSTITUTIONS, load_settings

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


class DatasetLoadError(RuntimeError):
    """The contributions dataset could not be read or is not a JSON array."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_source(source: str) -> str:
    if _is_url(source):
        try:
            # Cache-busting query parameter
            response = requests.get(
                source,
                params={"v": int(time.time() * 1000)},
                headers=NO_CACHE_HEADERS,
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DatasetLoadError(f"Failed to fetch {source}: {exc}") from exc
        logger.info("Fetched %s (HTTP %s)", source, response.status_code)
        return response.text

    path = Path(source)
    if not path.exists():
        raise DatasetLoadError(f"Data file not found: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Could not read {source}: {exc}") from exc


def parse_records(text: str) -> List[Any]:
    """Decode the dataset; the top-level value must be a JSON array."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(f"Dataset is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise DatasetLoadError(
            f"Dataset must be a JSON array of records, got {type(payload).__name__}"
        )
    return payload


def _valid_count(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return None


def parse_institutions(payload: Any) -> Dict[str, int]:
    """Accept a list of ``{nome, contribuicoes}`` objects or a plain name -> count mapping.

    Rows without a name or with a count that is not a non-negative integer
    are dropped with a warning.
    """
    if isinstance(payload, dict):
        rows = [{"nome": name, "contribuicoes": count} for name, count in payload.items()]
    elif isinstance(payload, list):
        rows = payload
    else:
        raise ValueError(f"Unsupported institutions payload: {type(payload).__name__}")

    institutions: Dict[str, int] = {}
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            logger.warning("Institution row %d is not an object; skipped", index)
            continue
        name = row.get("nome")
        count = _valid_count(row.get("contribuicoes"))
        if not isinstance(name, str) or not name.strip() or count is None:
            logger.warning("Institution row %d is invalid: %r", index, row)
            continue
        name = name.strip()
        institutions[name] = institutions.get(name, 0) + count
    return institutions


def load_records(source: Optional[str] = None) -> List[Any]:
    """Wrapper that resolves config and calls the cached implementation."""
    source = source or load_settings().data_source
    return _load_records_impl(source)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_records_impl(source: str) -> List[Any]:
    logger.info("Loading contributions from %s", source)
    records = parse_records(_read_source(source))
    logger.info("%d records loaded", len(records))
    diagnostics = {
        "source": source,
        "record_count": len(records),
        "non_object_records": sum(1 for r in records if not isinstance(r, dict)),
    }
    try:
        st.session_state["data_diagnostics"] = diagnostics
    except Exception:
        # No session state outside the Streamlit runtime
        pass
    return records


def load_institutions(source: Optional[str] = None) -> Dict[str, int]:
    """Load the institution mapping, falling back to the published figures."""
    source = source or load_settings().institutions_source
    return _load_institutions_impl(source)


@st.cache_data(show_spinner=False, ttl=CACHE_TTL_SECONDS)
def _load_institutions_impl(source: str) -> Dict[str, int]:
    try:
        institutions = parse_institutions(json.loads(_read_source(source)))
    except (DatasetLoadError, ValueError) as exc:
        logger.warning("Using default institutions; could not load %s: %s", source, exc)
        return dict(DEFAULT_INSTITUTIONS)
    if not institutions:
        logger.warning("No valid institutions in %s; using defaults", source)
        return dict(DEFAULT_INSTITUTIONS)
    return institutions


def clear_cache() -> None:
    _load_records_impl.clear()  # type: ignore[attr-defined]
    _load_institutions_impl.clear()  # type: ignore[attr-defined]
