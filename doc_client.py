import time
from pathlib import Path
from typing import Any

import filetype
import requests

from xmlview.dialect import FALLBACK_DOCUMENT


class DocumentFetchError(Exception):
    pass


def request(
    method: str,
    url: str,
    *,
    retries: int = 3,
    backoff: float = 1.0,
    **kwargs: Any,
) -> requests.Response:
    """A simple wrap of requests.request with retry"""
    last_exception: Exception | None = None

    for attempt in range(1, retries + 1):
        try:
            resp = requests.request(method, url, **kwargs)
        except requests.RequestException as e:
            last_exception = e
            print(f"Request to {url} failed: {e}")
            if attempt < retries:
                print(f"Retrying ({attempt}/{retries})...")
                time.sleep(backoff * attempt)
                continue
            raise DocumentFetchError(f"Could not reach {url}: {e}") from e

        if 200 <= resp.status_code <= 299:
            return resp

        if resp.status_code == 429 or 500 <= resp.status_code <= 599:
            if attempt < retries:
                print(
                    f"Request got bad status {resp.status_code}, "
                    f"retrying ({attempt}/{retries})..."
                )
                time.sleep(backoff * attempt)
                continue

        raise DocumentFetchError(f"Bad status code {resp.status_code} for {url}")

    if last_exception:
        raise DocumentFetchError(str(last_exception)) from last_exception
    raise DocumentFetchError(f"Unexpected request() failure for {url}")


def _decode_document(content: bytes, origin: str) -> str:
    kind = filetype.guess(content)
    if kind is not None:
        raise DocumentFetchError(
            f"{origin} is a binary {kind.mime} file, not an XML document"
        )
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentFetchError(f"{origin} is not valid UTF-8: {e}") from e


def fetch_document(
    location: str,
    *,
    timeout: int = 10,
    retries: int = 3,
    backoff: float = 1.0,
) -> str:
    """
    Load the XML text to edit from an http(s) url or a local path.
    An empty location gives the placeholder document.
    """
    if not location:
        return FALLBACK_DOCUMENT

    if location.startswith(("http://", "https://")):
        resp = request(
            "GET", location, retries=retries, backoff=backoff, timeout=timeout
        )
        return _decode_document(resp.content, location)

    path = Path(location).expanduser()
    if not path.is_file():
        raise DocumentFetchError(f"No such document: {path}")
    return _decode_document(path.read_bytes(), str(path))
