from unittest import mock

STREAM = {
    '_id': 23932774784,
    'game': 'StarCraft II',
    'viewers': 2123,
    'video_height': 720,
    'average_fps': 59.9,
    'delay': 0,
    'is_playlist': False,
    'created_at': '2015-02-12T04:42:31Z',
    '_links': {'self': 'https://api.twitch.tv/kraken/streams/test_channel'},
    'preview': {
        'small': 'https://static-cdn.jtvnw.net/previews-ttv/live_user_test_channel-80x45.jpg',
        'medium': 'https://static-cdn.jtvnw.net/previews-ttv/live_user_test_channel-320x180.jpg',
        'large': 'https://static-cdn.jtvnw.net/previews-ttv/live_user_test_channel-640x360.jpg',
        'template': 'https://static-cdn.jtvnw.net/previews-ttv/live_user_test_channel-{width}x{height}.jpg',
    },
    'channel': {
        '_id': 12345,
        'name': 'test_channel',
        'display_name': 'Test_Channel',
        'status': 'test status',
        'game': 'StarCraft II',
        'mature': False,
        'language': 'en',
        'broadcaster_language': 'en',
        'url': 'https://www.twitch.tv/test_channel',
        'followers': 40,
        'views': 2000,
        'partner': False,
        'created_at': '2007-05-22T10:39:54Z',
        'updated_at': '2015-02-12T04:15:49Z',
        'unknown_field': 'ignored',
    },
}

OTHER_STREAM = {
    **STREAM,
    '_id': 11111,
    'viewers': 10,
    'channel': {**STREAM['channel'], '_id': 54321, 'name': 'other_channel', 'display_name': 'Other_Channel'},
}


def make_handler(handler_class):
    handler = mock.Mock(spec=handler_class)
    handler._success.side_effect = lambda value: handler_class._success(handler, value)
    return handler


def assert_only_called(handler, name):
    for method in ('on_success', 'on_failure', 'on_exception'):
        if method == name:
            getattr(handler, method).assert_called_once()
        else:
            getattr(handler, method).assert_not_called()
