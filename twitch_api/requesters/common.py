import abc
from typing import Any, Callable, Dict, Optional

import ujson

from twitch_api.exceptions import TransportError


def maybe_json(text: str) -> Any:
    try:
        return ujson.loads(text)
    except Exception:
        return text


def accept_header(api_version: int) -> str:
    return f'application/vnd.twitchtv.v{api_version}+json'


class TwitchAPIRequester(abc.ABC):
    def __init__(self, url: str, api_version: int = 3) -> None:
        self.url = url.rstrip('/')
        self.api_version = api_version

    def build_headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        return {'Accept': accept_header(self.api_version), **(headers or {})}

    @abc.abstractmethod
    def get(self, uri: str, *, cb: Callable, errback: Callable, query: Optional[dict] = None,
            headers: Optional[Dict[str, str]] = None, raw: bool = False, **kwargs) -> Any:
        raise NotImplementedError


def transport_error(method: str, url: str, exc: BaseException) -> TransportError:
    error = TransportError(f'{method} request to {url} failed: {exc!r}')
    error.__cause__ = exc
    return error


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300
