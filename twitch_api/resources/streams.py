import logging
from typing import Any, Optional

from twitch_api.handlers import AggregateResponseHandler, PageResponseHandler, SingleResponseHandler
from twitch_api.objects import FeaturedStreamContainer, StreamContainer, Streams, StreamsSummary
from twitch_api.results import Result, page
from .base import AbstractResource, Credentials, query_params


def _stream(d: dict) -> Result:
    container = StreamContainer.from_dict(d)
    if container.stream is None:
        return Result.empty()
    return Result.success(container.stream)


def _streams(d: dict) -> Result:
    streams = Streams.from_dict(d)
    return page(streams.total, streams.streams)


def _featured(d: dict) -> Result:
    container = FeaturedStreamContainer.from_dict(d)
    return page(len(container.featured), container.featured)


def _summary(d: dict) -> Result:
    return Result.success(StreamsSummary.from_dict(d))


class StreamsResource(AbstractResource):
    """
    Access to the ``/streams`` endpoints of the Twitch API.

    Every operation accepts an optional ``handler`` that receives the outcome through callbacks,
    and optional ``credentials`` that replace the resource credentials for that request only.
    """

    def get(self, channel_name: str, *, handler: Optional[SingleResponseHandler] = None,
            credentials: Optional[Credentials] = None) -> Any:
        """Stream of the channel; an offline channel gives an empty result."""
        return self._get(f'streams/{channel_name}', parse=_stream, handler=handler, credentials=credentials,
                         error_log_level=logging.WARNING)

    def get_streams(self, params: Optional[dict] = None, *, handler: Optional[PageResponseHandler] = None,
                    credentials: Optional[Credentials] = None) -> Any:
        """
        Live streams sorted by number of viewers descending.

        :param params: optional query parameters:
            ``game``, streams categorized under the game;
            ``channel``, comma separated list of channels;
            ``limit``, maximum number of objects (25 by default, 100 at most);
            ``offset``, object offset for pagination;
            ``client_id``, only streams from applications of the client id.
        """
        return self._get('streams', parse=_streams, handler=handler, credentials=credentials,
                         query=query_params(params))

    def get_featured(self, params: Optional[dict] = None, *, handler: Optional[PageResponseHandler] = None,
                     credentials: Optional[Credentials] = None) -> Any:
        """Featured (promoted) streams. ``params`` takes ``limit`` and ``offset``."""
        return self._get('streams/featured', parse=_featured, handler=handler, credentials=credentials,
                         query=query_params(params))

    def get_summary(self, game: Optional[str] = None, *, handler: Optional[AggregateResponseHandler] = None,
                    credentials: Optional[Credentials] = None) -> Any:
        return self._get('streams/summary', parse=_summary, handler=handler, credentials=credentials,
                         query=query_params(game=game))

    def get_followed(self, params: Optional[dict] = None, *, handler: Optional[PageResponseHandler] = None,
                     credentials: Optional[Credentials] = None) -> Any:
        """Streams the authenticated user follows. Requires the ``user_read`` scope."""
        return self._get('streams/followed', parse=_streams, handler=handler, credentials=credentials,
                         query=query_params(params))
