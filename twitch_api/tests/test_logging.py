import io
import logging
import unittest
from unittest import mock

from parameterized import parameterized

from twitch_api.logging import ForwardingFormatter, lower_than, mask_sensitive_data, setup_logging


class TestLowerThan(unittest.TestCase):

    def test_lower(self):
        lt = lower_than(logging.getLevelName(logging.ERROR))
        record = mock.Mock(levelno=logging.WARNING)
        self.assertTrue(lt(record))

    def test_equal(self):
        lt = lower_than(logging.getLevelName(logging.ERROR))
        record = mock.Mock(levelno=logging.ERROR)
        self.assertFalse(lt(record))

    def test_higher(self):
        lt = lower_than(logging.getLevelName(logging.ERROR))
        record = mock.Mock(levelno=logging.CRITICAL)
        self.assertFalse(lt(record))


class TestMaskSensitiveData(unittest.TestCase):
    def test_headers_are_masked(self):
        data = {'request': {'url': 'http://test.com', 'headers': {
            'Accept': 'application/vnd.twitchtv.v3+json',
            'Authorization': 'OAuth token',
            'Client-ID': 'client_id',
        }}}

        self.assertEqual(mask_sensitive_data(data), {'request': {'url': 'http://test.com', 'headers': {
            'Accept': 'application/vnd.twitchtv.v3+json',
            'Authorization': 'str(*****)',
            'Client-ID': 'str(*****)',
        }}})

    def test_collections(self):
        self.assertEqual(mask_sensitive_data([{'access_token': 'a'}, 1]), ({'access_token': 'str(*****)'}, 1))


class TestSwitchFormatter(unittest.TestCase):

    def test_no_default_given(self):
        with self.assertRaisesRegex(AssertionError, 'default'):
            ForwardingFormatter(formatters={}, default='default')

    @parameterized.expand((
         (mock.Mock(**{ForwardingFormatter.KEY: 'default'}),),
         (mock.Mock(**{ForwardingFormatter.KEY: 'specific'}),),
         (mock.Mock(**{ForwardingFormatter.KEY: 'non_existing'}),),
         (mock.Mock(),),
    ))
    def test_get_formatter(self, record):
        formatters = {
            'default': mock.Mock(),
            'specific': mock.Mock(),
        }
        expected_formatter = formatters.get(
            getattr(record, ForwardingFormatter.KEY, 'default'),
            formatters['default']
        )

        switch = ForwardingFormatter(formatters=formatters, default='default')
        ret = switch.format(record)

        expected_formatter.format.assert_called_once_with(record)
        self.assertEqual(expected_formatter.format.return_value, ret)

    def test_apply(self):
        formatters = {
            'default': mock.Mock(),
        }
        record = mock.Mock()
        apply_mock = mock.Mock()

        switch = ForwardingFormatter(formatters=formatters, default='default', apply=apply_mock)
        ret = switch.format(record)

        apply_mock.assert_called_once_with(record)
        formatters['default'].format.assert_called_once_with(record)
        self.assertEqual(formatters['default'].format.return_value, ret)

    def test_masks_record_data(self):
        switch = ForwardingFormatter(formatters={'default': logging.Formatter('%(message)s %(data)s')})
        record = logging.LogRecord('twitch_api', logging.INFO, __file__, 1, 'GET request.', None, None)
        record.data = {'headers': {'Authorization': 'OAuth token'}}

        self.assertEqual(switch.format(record), "GET request. {'headers': {'Authorization': 'str(*****)'}}")


class TestSetupLogging(unittest.TestCase):
    def setUp(self) -> None:
        self.root_handlers = logging.getLogger().handlers[:]
        self.root_level = logging.getLogger().level

    def tearDown(self) -> None:
        logging.getLogger().handlers = self.root_handlers
        logging.getLogger().setLevel(self.root_level)
        logger = logging.getLogger('twitch_api')
        logger.handlers = []
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_default_config(self):
        stdout = io.StringIO()

        with mock.patch('sys.stdout', stdout), mock.patch('sys.stderr', io.StringIO()):
            setup_logging()
            logging.getLogger('twitch_api.test').info('Request sent.', extra={'data': {'client_id': 'secret'}})

        output = stdout.getvalue()
        self.assertIn('Request sent.', output)
        self.assertIn('str(*****)', output)
        self.assertNotIn('secret', output)
