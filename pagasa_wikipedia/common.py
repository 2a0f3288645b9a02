"""Shared utilities for the converter.

This module is intentionally converter-agnostic. It contains:
- per-run logging setup (INFO/ERROR loggers + run id)
- the shared HTTP session and JSON helpers used by the MediaWiki and
  bulletin collaborators

Remote calls are one-shot: a failed request raises and aborts the run.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

import requests

from .config import _DEFAULT_USER_AGENT
from .errors import ConverterError, WikipediaApiError


def _setup_run_logging() -> tuple[logging.Logger, logging.Logger, str, str]:
    """Create per-run file loggers for conversions."""
    default_logs_dir = str(Path(__file__).resolve().parent / "logs")
    logs_dir = Path(os.getenv("PAGASA_WIKI_LOG_DIR", default_logs_dir))
    logs_dir.mkdir(parents=True, exist_ok=True)

    run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    info_path = logs_dir / f"convert_{run_id}.info.log"
    err_path = logs_dir / f"convert_{run_id}.error.log"

    fmt = logging.Formatter("%(asctime)sZ\t%(levelname)s\t%(message)s")

    info_logger = logging.getLogger(f"pagasa_wikipedia.info.{run_id}")
    info_logger.setLevel(logging.INFO)
    info_logger.propagate = False
    if not info_logger.handlers:
        ih = logging.FileHandler(info_path, encoding="utf-8", delay=True)
        ih.setFormatter(fmt)
        info_logger.addHandler(ih)

    err_logger = logging.getLogger(f"pagasa_wikipedia.error.{run_id}")
    err_logger.setLevel(logging.ERROR)
    err_logger.propagate = False
    if not err_logger.handlers:
        eh = logging.FileHandler(err_path, encoding="utf-8", delay=True)
        eh.setFormatter(fmt)
        err_logger.addHandler(eh)

    return info_logger, err_logger, str(logs_dir), run_id


INFO_LOG, ERROR_LOG, LOGS_DIR, RUN_ID = _setup_run_logging()


def log_info(msg: str) -> None:
    print(f"ℹ️ {msg}", flush=True)
    INFO_LOG.info(msg)


def log_error(msg: str) -> None:
    print(f"❌ {msg}", flush=True)
    ERROR_LOG.error(msg)


def _build_wikipedia_session() -> requests.Session:
    """Create a requests session with a proper User-Agent."""
    session = requests.Session()
    ua = os.getenv("WIKIPEDIA_USER_AGENT", "").strip() or _DEFAULT_USER_AGENT
    session.headers.update({"User-Agent": ua})
    return session


WIKI_SESSION = _build_wikipedia_session()


def _decode_json(resp: requests.Response, context: str, error_cls: type[ConverterError]) -> dict:
    where = f" ({context})" if context else ""
    try:
        data = resp.json()
    except ValueError as e:
        snippet = (resp.text or "").replace("\n", " ").strip()[:300]
        msg = f"HTTP {resp.status_code} non-JSON response{where}: {snippet}"
        log_error(msg)
        raise error_cls(msg) from e

    if not isinstance(data, dict):
        msg = f"Unexpected JSON payload{where}: {type(data).__name__}"
        log_error(msg)
        raise error_cls(msg)

    if data.get("error"):
        msg = f"API error{where}: {data['error']}"
        log_error(msg)
        raise error_cls(msg)

    return data


def _get_json(
    url: str,
    *,
    params: dict | None = None,
    timeout: int = 30,
    headers: dict | None = None,
    context: str = "",
    error_cls: type[ConverterError] = WikipediaApiError,
) -> dict:
    """GET JSON with good diagnostics when the response isn't JSON."""
    try:
        resp = WIKI_SESSION.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        msg = f"Request error{f' ({context})' if context else ''}: {e}"
        log_error(msg)
        raise error_cls(msg) from e
    return _decode_json(resp, context, error_cls)


def _post_json(
    url: str,
    *,
    data: dict,
    timeout: int = 30,
    headers: dict | None = None,
    context: str = "",
    error_cls: type[ConverterError] = WikipediaApiError,
) -> dict:
    """POST form data and decode a JSON response."""
    try:
        resp = WIKI_SESSION.post(url, data=data, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        msg = f"Request error{f' ({context})' if context else ''}: {e}"
        log_error(msg)
        raise error_cls(msg) from e
    return _decode_json(resp, context, error_cls)
