import abc
from typing import Any, List, Optional

from twitch_api.exceptions import ApiError
from twitch_api.results import Page, Result


class ResponseHandler(abc.ABC):
    """Callbacks bound to one request. Exactly one of them is called per request."""

    @abc.abstractmethod
    def on_failure(self, status_code: int, status_text: str, message: str) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def on_exception(self, exception: Exception) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def _success(self, value: Any) -> None:
        raise NotImplementedError


class SingleResponseHandler(ResponseHandler):
    @abc.abstractmethod
    def on_success(self, value: Optional[Any]) -> None:
        raise NotImplementedError

    def _success(self, value: Any) -> None:
        self.on_success(value)


class PageResponseHandler(ResponseHandler):
    @abc.abstractmethod
    def on_success(self, total: Optional[int], items: List) -> None:
        raise NotImplementedError

    def _success(self, value: Page) -> None:
        self.on_success(value.total, value.items)


class AggregateResponseHandler(ResponseHandler):
    @abc.abstractmethod
    def on_success(self, summary: Any) -> None:
        raise NotImplementedError

    def _success(self, value: Any) -> None:
        self.on_success(value)


def dispatch(result: Result, handler: ResponseHandler) -> None:
    if result.ok:
        handler._success(result.value)
    elif isinstance(result.error, ApiError):
        error = result.error
        handler.on_failure(error.status_code, error.status_text, error.message)
    else:
        handler.on_exception(result.error)
