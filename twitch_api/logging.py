import logging
import logging.config
from logging import Formatter
from typing import Any, Callable, Dict, Mapping, Optional

log = logging.getLogger(__name__)

SENSITIVE_WORDS = ('PASSWORD', 'SECRET', 'TOKEN', 'AUTHORIZATION', 'CLIENT-ID', 'CLIENT_ID')


def mask_sensitive_data(data: Any):
    def is_sensitive(key):
        return isinstance(key, str) and any((word in key.upper() for word in SENSITIVE_WORDS))

    if isinstance(data, dict):
        return data.__class__({k: f'{type(v).__name__}(*****)' if is_sensitive(k) else mask_sensitive_data(v)
                               for k, v in data.items()})
    elif isinstance(data, (tuple, list)):
        return tuple((mask_sensitive_data(item) for item in data))
    else:
        return data


def lower_than(level: str) -> Callable:
    levelno = logging._checkLevel(level)

    def action(record) -> bool:
        return record.levelno < levelno

    return action


class ForwardingFormatter(Formatter):
    KEY = 'target_formatter'

    def __init__(self,
                 formatters: Dict[str, Formatter],
                 default: str = 'default',
                 apply: Callable = None,
                 mask_sensitive_data: bool = True):

        super().__init__()
        assert default in formatters, f"default formatter '{default}' is missing"
        self._formatters = formatters
        self._default = default
        self._apply = apply
        self._mask_sensitive_data = mask_sensitive_data

    def _get_formatter(self, record: logging.LogRecord) -> Formatter:
        if self._apply:
            self._apply(record)

        formatter_name = getattr(record, self.KEY, self._default)

        try:
            return self._formatters[formatter_name]
        except KeyError:
            log.debug(f"Cannot find '{formatter_name}' formatter.")
            return self._formatters[self._default]

    def _mask(self, record) -> None:
        if self._mask_sensitive_data:
            record.__dict__.update(mask_sensitive_data(record.__dict__))

    def formatTime(self, record, datefmt=None) -> str:
        self._mask(record)
        return self._get_formatter(record).formatTime(record, datefmt=datefmt)

    def formatMessage(self, record) -> str:
        self._mask(record)
        return self._get_formatter(record).formatMessage(record)

    def format(self, record) -> str:
        self._mask(record)
        return self._get_formatter(record).format(record)


def setup_logging(log_config: Optional[Mapping] = None) -> None:
    """Applies ``log_config``, or the dict config named by the ``LOG_CONFIG`` setting."""
    if log_config is None:
        from twitch_api.config import load_logging_config
        log_config = load_logging_config()

    logging.config.dictConfig(log_config)
