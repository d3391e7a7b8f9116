import logging
from typing import Any, Callable, Dict, Optional

import requests

from twitch_api.exceptions import RequestApiError
from .common import TwitchAPIRequester, is_success, maybe_json, transport_error

log = logging.getLogger(__name__)


class TwitchAPISyncRequester(TwitchAPIRequester):
    """
    Sync version of requester
    """

    def get(self, uri: str, *, cb: Callable, errback: Callable, query: Optional[dict] = None,
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
                result = requests.get(url, headers=headers, params=query)
            except requests.RequestException as e:
                log.log(error_log_level, f'Failed GET request to {url}.', extra={'data': debug_data}, exc_info=e)
                return errback(transport_error('GET', url, e), **kwargs)

            response = result.content if raw else result.text

            debug_data['response'] = {
                'status': f'{result.status_code} {result.reason}',
                'value': maybe_json(response),
                'headers': dict(result.headers),
            }

        finally:
            log.debug(f'GET request to {url}.', extra={'data': debug_data})

        if not is_success(result.status_code):
            log.log(error_log_level, f'Failed GET request to {url}.', extra={'data': debug_data})
            return errback(RequestApiError(result.status_code, result.reason or '', result.text), **kwargs)

        return cb(response, **kwargs)
