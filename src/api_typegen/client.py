"""Runtime HTTP client for APIs described by a generated endpoint type.

Routes are registered up front as {path: [methods]}; `client[path].get(...)`
then issues the request. Paths may use `:name` or `{name}` placeholders.
"""

import re
from functools import partial
from typing import Any, Callable

import requests

from api_typegen import config

_PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)|\{([^}/]+)\}")

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "head", "options")

Interceptor = Callable[[Any], Any]


def fill_path(path: str, params: dict[str, Any] | None) -> str:
    """Substitute `:name` / `{name}` placeholders with values from `params`."""
    if not params:
        return path

    def _replace(match: re.Match) -> str:
        name = match.group(1) or match.group(2)
        if name not in params:
            return match.group(0)
        return str(params[name])

    return _PLACEHOLDER_RE.sub(_replace, path)


class Route:
    """Callables for the registered methods of one path."""

    def __init__(self, path: str, methods: dict[str, Callable[..., Any]]):
        self.path = path
        self._methods = methods

    def __getattr__(self, name: str) -> Callable[..., Any]:
        try:
            return self.__dict__["_methods"][name]
        except KeyError:
            raise AttributeError(f"{name.upper()} is not registered for {self.__dict__.get('path')}") from None

    def __dir__(self):
        return [*super().__dir__(), *self._methods]

    def __repr__(self) -> str:
        return f"Route({self.path!r}, {sorted(self._methods)})"


class ApiClient:
    """HTTP client bound to an explicit (path, method) registry."""

    def __init__(
        self,
        base_url: str,
        routes: dict[str, list[str]] | None = None,
        headers: dict[str, str] | None = None,
        on_success: Interceptor | None = None,
        on_error: Interceptor | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.on_success = on_success
        self.on_error = on_error
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.routes: dict[str, Route] = {}
        for path, methods in (routes or {}).items():
            self.register(path, methods)

    @classmethod
    def from_document(cls, document: dict[str, Any], base_url: str, **kwargs) -> "ApiClient":
        """Build the route registry from an OpenAPI document's `paths`."""
        routes = {
            path: [m for m in item if m.lower() in HTTP_METHODS]
            for path, item in (document.get("paths") or {}).items()
        }
        return cls(base_url, routes=routes, **kwargs)

    def register(self, path: str, methods: list[str]) -> Route:
        existing = self.routes[path]._methods if path in self.routes else {}
        bound = dict(existing)
        for method in methods:
            method = method.lower()
            if method not in HTTP_METHODS:
                raise ValueError(f"Unsupported HTTP method: {method}")
            bound[method] = partial(self.request, method.upper(), path)
        self.routes[path] = Route(path, bound)
        return self.routes[path]

    def __getitem__(self, path: str) -> Route:
        return self.routes[path]

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (None for 204)."""
        url = self.base_url + fill_path(path, params)
        merged_headers = {**self.headers, **(headers or {})}
        query_items = {k: v for k, v in (query or {}).items() if v is not None}

        kwargs: dict[str, Any] = {"headers": merged_headers, "timeout": self.timeout}
        if query_items:
            kwargs["params"] = query_items
        if body is not None:
            merged_headers.setdefault("Content-Type", "application/json")
            kwargs["json"] = body

        response = self.session.request(method, url, **kwargs)

        if not response.ok:
            data = response.json()
            return self.on_error(data) if self.on_error else data

        data = None if response.status_code == 204 else response.json()
        return self.on_success(data) if self.on_success else data
