"""Load an OpenAPI document from a URL or a local file."""

from pathlib import Path
from typing import Any

import requests
import yaml

from api_typegen import config


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_document(url: str, timeout: float | None = None) -> Any:
    """GET `url` and decode the body as JSON.

    HTTP errors and non-JSON bodies propagate as raised by requests.
    """
    response = requests.get(url, timeout=timeout or config.REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def read_document(file_path: Path) -> Any:
    """Read a JSON or YAML document from disk."""
    text = file_path.read_text(encoding="utf-8")
    return yaml.safe_load(text)


def load_document(source: str) -> Any:
    if is_url(source):
        return fetch_document(source)
    return read_document(Path(source))
