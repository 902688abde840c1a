# catalog_query.py
"""Range queries against the NASA Exoplanet Archive TAP service.

Builds ADQL from min/max form input, fetches the JSON result and hands back
raw rows for `planetary_system.create_simulation_from_record`.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from config import config
from physics_utils import to_finite_float

class CatalogQueryError(Exception):
    """Raised when the catalog cannot be reached or returns an unusable response."""
    pass

@dataclass
class FetchResult:
    ok: bool
    data: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

def _format_number(value: float) -> str:
    """Shortest decimal form; integral values print without a fractional part (1.0 -> '1')."""
    if value.is_integer():
        return str(int(value))
    return repr(value)

def build_where(query_input: Mapping[str, Any]) -> str:
    """
    WHERE clause for a range query.

    Always selects the default parameter set. A range contributes only when both
    its min and max are present and numeric; half-open or malformed ranges are
    skipped rather than rejected.
    """
    parts = [config.Catalog.DEFAULT_FLAG_CLAUSE]
    for column, min_key, max_key in config.Catalog.RANGE_FILTERS:
        raw_min = query_input.get(min_key)
        raw_max = query_input.get(max_key)
        if raw_min in (None, "") or raw_max in (None, ""):
            continue
        low = to_finite_float(raw_min)
        high = to_finite_float(raw_max)
        if low is None or high is None:
            logging.warning(f"Ignoring non-numeric range for {column}: [{raw_min!r}, {raw_max!r}]")
            continue
        parts.append(
            f"({column} IS NOT NULL AND {column} BETWEEN {_format_number(low)} AND {_format_number(high)})"
        )
    return " AND ".join(parts)

def build_query(query_input: Mapping[str, Any]) -> str:
    columns = ",".join(config.Catalog.SELECT_COLUMNS)
    return f"SELECT {columns} FROM {config.Catalog.TABLE} WHERE {build_where(query_input)}"

def build_names_query(names: List[str]) -> str:
    """Query for specific planets by name; single quotes are doubled per ADQL."""
    quoted = ", ".join("'" + name.replace("'", "''") + "'" for name in names)
    columns = ",".join(config.Catalog.SELECT_COLUMNS)
    return (
        f"SELECT {columns} FROM {config.Catalog.TABLE} "
        f"WHERE {config.Catalog.DEFAULT_FLAG_CLAUSE} AND pl_name IN ({quoted})"
    )

def build_request_url(query: str) -> str:
    return f"{config.Catalog.TAP_BASE_URL}?query={quote(query, safe='')}&format={config.Catalog.RESPONSE_FORMAT}"

def build_proxy_url(target_url: str) -> str:
    return config.Catalog.CORS_PROXY_URL + quote(target_url, safe='')

def parse_rows(payload) -> List[Dict[str, Any]]:
    """Accepts a bare JSON array, or an object wrapping it under `data` or `results`."""
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        rows = payload.get("data")
        if rows is None:
            rows = payload.get("results")
        if not isinstance(rows, list):
            rows = []
    else:
        rows = []
    return [row for row in rows if isinstance(row, dict)]

@retry(
    retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
    stop=stop_after_attempt(config.Catalog.RETRY_ATTEMPTS),
    wait=wait_exponential(multiplier=1, min=config.Catalog.RETRY_WAIT_MIN_SECONDS, max=config.Catalog.RETRY_WAIT_MAX_SECONDS),
    reraise=True,
)
def _get(session, url: str) -> requests.Response:
    logging.info(f"Requesting catalog URL: {url[:200]}")
    return session.get(url, timeout=config.Catalog.REQUEST_TIMEOUT_SECONDS)

def _read_response(response: requests.Response) -> List[Dict[str, Any]]:
    if not response.ok:
        raise CatalogQueryError(f"Request failed: {response.status_code}")
    try:
        payload = response.json()
    except ValueError as e:
        raise CatalogQueryError(f"Catalog returned invalid JSON: {e}") from e
    return parse_rows(payload)

def fetch_rows(query: str, session=None) -> List[Dict[str, Any]]:
    """
    Runs `query` and returns the parsed rows.

    Transport failures are retried with exponential backoff. If the direct route
    still fails and the proxy fallback is enabled, the same request goes through
    the relay under the same retry policy.

    Raises:
        CatalogQueryError: On HTTP errors, invalid JSON, or exhausted retries.
    """
    session = session or requests.Session()
    url = build_request_url(query)
    try:
        response = _get(session, url)
    except (requests.ConnectionError, requests.Timeout) as e_direct:
        if not config.Catalog.USE_PROXY_FALLBACK:
            logging.error(f"Catalog request failed: {e_direct}", exc_info=True)
            raise CatalogQueryError(str(e_direct) or "Network error") from e_direct
        logging.warning(f"Direct catalog request failed ({e_direct}); retrying through proxy.")
        try:
            response = _get(session, build_proxy_url(url))
        except requests.RequestException as e_proxy:
            logging.error(f"Catalog request through proxy failed: {e_proxy}", exc_info=True)
            raise CatalogQueryError(str(e_proxy) or "Network error") from e_proxy
    except requests.RequestException as e_request:
        logging.error(f"Catalog request failed: {e_request}", exc_info=True)
        raise CatalogQueryError(str(e_request) or "Network error") from e_request

    rows = _read_response(response)
    logging.info(f"Catalog returned {len(rows)} row(s).")
    return rows

def fetch_planets(query_input: Mapping[str, Any], session=None) -> FetchResult:
    """Range search. Never raises for catalog failures; inspect `FetchResult.ok`."""
    try:
        return FetchResult(ok=True, data=fetch_rows(build_query(query_input), session=session))
    except CatalogQueryError as e:
        return FetchResult(ok=False, error=str(e))

def fetch_planets_by_names(names: List[str], session=None) -> FetchResult:
    if not names:
        return FetchResult(ok=True, data=[])
    try:
        return FetchResult(ok=True, data=fetch_rows(build_names_query(names), session=session))
    except CatalogQueryError as e:
        return FetchResult(ok=False, error=str(e))
