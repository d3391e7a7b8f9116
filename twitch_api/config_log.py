import ujson

from twitch_api.config import config

LOG_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'string': {
            'class': 'logging.Formatter',
            'format': '%(asctime)s [%(filename)s:%(lineno)d %(name)s:%(funcName)s() %(levelname)s] '
                      '%(message)s%(opt_data)s',
        },
        'switch': {
            '()': 'twitch_api.logging.ForwardingFormatter',
            'formatters': 'cfg://formatters',
            'default': 'string',
            'mask_sensitive_data': True,
            'apply': lambda record: (
                setattr(record, 'opt_data', f'\n{ujson.dumps(record.data, indent=2, reject_bytes=False)}'
                                            if hasattr(record, 'data') else ''),
            ),
        },
    },
    'filters': {
        'lower_than_ERROR': {
            '()': 'twitch_api.logging.lower_than',
            'level': 'ERROR',
        },
    },
    'handlers': {
        'stdout': {
            'class': 'logging.StreamHandler',
            'formatter': 'switch',
            'filters': ['lower_than_ERROR'],
            'stream': 'ext://sys.stdout',
        },
        'stderr': {
            'class': 'logging.StreamHandler',
            'formatter': 'switch',
            'level': 'ERROR',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'twitch_api': {
            'level': config.LOG_LEVEL,
            'handlers': ['stdout', 'stderr'],
            'propagate': False,
        },
    },
    'root': {
        'level': config.LOG_LEVEL_LIBS,
        'handlers': ['stdout', 'stderr'],
    }
}
