import logging
import time
from collections import namedtuple
from typing import Any, Callable, Dict, Optional

import ujson

from twitch_api.exceptions import ApiError, RequestApiError, ResponseParseError, TwitchAPIError
from twitch_api.handlers import ResponseHandler, dispatch
from twitch_api.objects import Error
from twitch_api.requesters.common import TwitchAPIRequester
from twitch_api.results import Result

log = logging.getLogger(__name__)


class Credentials(namedtuple('Credentials', 'access_token, client_id')):
    """Authentication context attached to a request. Empty values produce no header at all."""
    __slots__ = ()

    def __new__(cls, access_token: Optional[str] = None, client_id: Optional[str] = None) -> 'Credentials':
        return super().__new__(cls, access_token or None, client_id or None)

    def headers(self) -> Dict[str, str]:
        headers = {}
        if self.access_token:
            headers['Authorization'] = f'OAuth {self.access_token}'
        if self.client_id:
            headers['Client-ID'] = self.client_id
        return headers


def parse_error(e: Exception) -> ResponseParseError:
    if isinstance(e, ResponseParseError):
        return e

    error = ResponseParseError(f'Malformed response: {e}')
    error.__cause__ = e
    return error


def translate_failure(error: RequestApiError) -> TwitchAPIError:
    if not error.body:
        return ApiError(error.status_code, '', '')

    try:
        envelope = Error.from_dict(ujson.loads(error.body))
    except (ValueError, ResponseParseError) as e:
        return parse_error(e)

    return ApiError(error.status_code, envelope.status_text, envelope.message)


class AbstractResource:
    """
    Base class of a Twitch resource, i.e. the group of REST endpoints under one path.

    The requester decides the calling convention: with a sync requester every operation returns
    a :class:`Result`, with an async one it returns a coroutine resolving to a :class:`Result`.
    The bookkeeping attributes are per instance and are overwritten by every request.
    """

    def __init__(self, requester: TwitchAPIRequester, credentials: Optional[Credentials] = None) -> None:
        self.requester = requester
        self.credentials = credentials or Credentials()
        self.last_request_successful = False
        self.last_successful_update = 0.0

    @property
    def base_url(self) -> str:
        return self.requester.url

    def set_auth_access_token(self, access_token: Optional[str]) -> None:
        self.credentials = Credentials(access_token, self.credentials.client_id)

    def set_client_id(self, client_id: Optional[str]) -> None:
        self.credentials = Credentials(self.credentials.access_token, client_id)

    def set_last_request_successful(self, success: bool) -> None:
        self.last_request_successful = success
        if success:
            self.last_successful_update = time.time()

    def _get(self, uri: str, *, parse: Callable[[Any], Result], handler: Optional[ResponseHandler] = None,
             query: Optional[dict] = None, credentials: Optional[Credentials] = None, **kwargs) -> Any:
        headers = (credentials or self.credentials).headers()
        return self.requester.get(uri,
                                  cb=self._callback(parse, handler),
                                  errback=self._errback(handler),
                                  query=query,
                                  headers=headers,
                                  **kwargs)

    def _complete(self, result: Result, handler: Optional[ResponseHandler]) -> Result:
        self.set_last_request_successful(result.ok)
        if handler is not None:
            dispatch(result, handler)
        return result

    def _callback(self, parse: Callable[[Any], Result], handler: Optional[ResponseHandler]) -> Callable:
        def action(response: str, **kwargs) -> Result:
            try:
                result = parse(ujson.loads(response))
            except (ValueError, TypeError, ResponseParseError) as e:
                log.warning('Failed to parse response.', extra={'data': {'response': response}}, exc_info=e)
                result = Result.failure(parse_error(e))
            return self._complete(result, handler)

        return action

    def _errback(self, handler: Optional[ResponseHandler]) -> Callable:
        def action(error: TwitchAPIError, **kwargs) -> Result:
            if isinstance(error, RequestApiError):
                error = translate_failure(error)
            return self._complete(Result.failure(error), handler)

        return action


def query_params(params: Optional[dict] = None, **extra) -> Optional[dict]:
    query = {k: v for k, v in {**(params or {}), **extra}.items() if v is not None}
    return query or None
