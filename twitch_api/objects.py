from collections import namedtuple
from typing import Any, Callable, List, Type

from twitch_api.exceptions import ResponseParseError


def wire_name(key: str) -> str:
    # _id, _total and _links are meta keys; every other key already is snake_case
    return key.lstrip('_')


def from_wire(cls: Type, d: Any, **converters: Callable) -> Any:
    if not isinstance(d, dict):
        raise ResponseParseError(f'{cls.__name__} expects a JSON object, got {type(d).__name__}.')

    values = {wire_name(k): v for k, v in d.items()}
    kwargs = {}
    for field in cls._fields:
        value = values.get(field)
        convert = converters.get(field)
        if convert is not None and value is not None:
            value = convert(value)
        kwargs[field] = value

    return cls(**kwargs)


def list_of(convert: Callable) -> Callable:
    def action(items: Any) -> List:
        if not isinstance(items, list):
            raise ResponseParseError(f'Expected a JSON array, got {type(items).__name__}.')
        return [convert(item) for item in items]

    return action


class Preview(namedtuple('Preview', 'small, medium, large, template')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'Preview':
        return from_wire(Preview, d)


class Channel(namedtuple('Channel',
                         'id, name, display_name, status, game, mature, language, broadcaster_language, '
                         'url, logo, banner, video_banner, followers, views, partner, delay, '
                         'created_at, updated_at, links')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'Channel':
        return from_wire(Channel, d)


class Stream(namedtuple('Stream',
                        'id, game, viewers, video_height, average_fps, delay, is_playlist, '
                        'created_at, channel, preview, links')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'Stream':
        return from_wire(Stream, d, channel=Channel.from_dict, preview=Preview.from_dict)


class StreamContainer(namedtuple('StreamContainer', 'stream, links')):
    """``{"stream": {...}}``; ``stream`` is ``None`` when the channel is offline."""
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'StreamContainer':
        return from_wire(StreamContainer, d, stream=Stream.from_dict)


class Streams(namedtuple('Streams', 'total, streams, links')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'Streams':
        streams = from_wire(Streams, d, streams=list_of(Stream.from_dict))
        return streams._replace(streams=streams.streams or [])


class FeaturedStream(namedtuple('FeaturedStream', 'image, text, title, sponsored, priority, scheduled, stream')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'FeaturedStream':
        return from_wire(FeaturedStream, d, stream=Stream.from_dict)


class FeaturedStreamContainer(namedtuple('FeaturedStreamContainer', 'featured, links')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'FeaturedStreamContainer':
        container = from_wire(FeaturedStreamContainer, d, featured=list_of(FeaturedStream.from_dict))
        return container._replace(featured=container.featured or [])


class StreamsSummary(namedtuple('StreamsSummary', 'channels, viewers, links')):
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'StreamsSummary':
        return from_wire(StreamsSummary, d)


class Error(namedtuple('Error', 'status_text, status, message')):
    """Error envelope, e.g. ``{"error": "Not Found", "status": 404, "message": "..."}``."""
    __slots__ = ()

    @staticmethod
    def from_dict(d: dict) -> 'Error':
        if not isinstance(d, dict):
            raise ResponseParseError(f'Error expects a JSON object, got {type(d).__name__}.')

        status_text = d.get('error') or d.get('status_text')
        message = d.get('message')
        return Error(
            status_text=str(status_text) if status_text is not None else '',
            status=d.get('status'),
            message=str(message) if message is not None else '',
        )
