import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import aiohttp

from twitch_api.exceptions import RequestApiError
from .common import TwitchAPIRequester, is_success, maybe_json, transport_error

log = logging.getLogger(__name__)


class TwitchAPIAsyncRequester(TwitchAPIRequester):
    """
    Async version of requester. Every call opens its own client session, so a requester
    may be shared between event loops.
    """

    async def get(self, uri: str, *, cb: Callable, errback: Callable, query: Optional[dict] = None,
                  headers: Optional[Dict[str, str]] = None, raw: bool = False,
                  error_log_level: int = logging.ERROR, **kwargs) -> Any:
        url = f'{self.url}/{uri}'
        headers = self.build_headers(headers)
        debug_data = {}
        try:
            debug_data['request'] = {
                'url': url,
                'query': dict(query) if query is not None else None,
                'headers': dict(headers),
            }

            try:
                async with aiohttp.ClientSession() as session:
                    result = await session.get(url, headers=headers, params=query)
                    response = await result.read() if raw else await result.text(errors='replace')
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                log.log(error_log_level, f'Failed GET request to {url}.', extra={'data': debug_data}, exc_info=e)
                return errback(transport_error('GET', url, e), **kwargs)

            debug_data['response'] = {
                'status': f'{result.status} {result.reason}',
                'value': maybe_json(response),
                'headers': dict(result.headers),
            }

        finally:
            log.debug(f'GET request to {url}.', extra={'data': debug_data})

        if not is_success(result.status):
            log.log(error_log_level, f'Failed GET request to {url}.', extra={'data': debug_data})
            body = response.decode('utf-8', 'replace') if raw else response
            return errback(RequestApiError(result.status, result.reason or '', body), **kwargs)

        return cb(response, **kwargs)
