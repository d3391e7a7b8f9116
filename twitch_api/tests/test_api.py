import unittest
from unittest import mock

import responses

import twitch_api.config as config_module
from twitch_api.api import TwitchAPI
from twitch_api.requesters.asyn import TwitchAPIAsyncRequester
from twitch_api.requesters.syn import TwitchAPISyncRequester
from twitch_api.resources.base import Credentials
from twitch_api.resources.streams import StreamsResource
from twitch_api.tests.fixtures import STREAM


class TestTwitchAPI(unittest.TestCase):
    def test_resources_share_requester(self):
        requester = mock.Mock()
        api = TwitchAPI(requester, Credentials('token'))

        self.assertIsInstance(api.streams, StreamsResource)
        self.assertIs(api.streams.requester, requester)
        self.assertEqual(api.streams.credentials, Credentials('token'))

    def test_credentials_setters(self):
        api = TwitchAPI(mock.Mock())
        api.set_auth_access_token('token')
        api.set_client_id('client_id')

        self.assertEqual(api.streams.credentials, Credentials('token', 'client_id'))

    def test_from_config(self):
        with mock.patch.multiple(config_module.config, BASE_URL='http://api.test.com/kraken', API_VERSION=5,
                                 AUTH_ACCESS_TOKEN='', CLIENT_ID='client_id'):
            api = TwitchAPI.from_config()

        self.assertIsInstance(api.requester, TwitchAPISyncRequester)
        self.assertEqual(api.requester.url, 'http://api.test.com/kraken')
        self.assertEqual(api.requester.api_version, 5)
        self.assertEqual(api.streams.credentials, Credentials(None, 'client_id'))

    def test_from_config_async(self):
        self.assertIsInstance(TwitchAPI.from_config(asynchronous=True).requester, TwitchAPIAsyncRequester)

    @responses.activate
    def test_streams(self):
        responses.add(responses.GET, 'http://api.test.com/kraken/streams/test_channel',
                      json={'stream': STREAM}, status=200)

        with mock.patch.multiple(config_module.config, BASE_URL='http://api.test.com/kraken', CLIENT_ID='client_id'):
            api = TwitchAPI.from_config()

        result = api.streams.get('test_channel')

        self.assertTrue(result.ok)
        self.assertEqual(result.value.channel.name, 'test_channel')
        self.assertEqual(responses.calls[0].request.headers['Client-ID'], 'client_id')
