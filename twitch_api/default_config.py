CONFIG_MODULE = 'Env'
ENV_CONFIG_VAR_PREFIX = 'TWITCH_API_'

BASE_URL = 'https://api.twitch.tv/kraken'
API_VERSION = 3

# empty values are not sent
AUTH_ACCESS_TOKEN = ''
CLIENT_ID = ''

LOG_LEVEL = 'INFO'
LOG_LEVEL_LIBS = 'WARNING'
LOG_CONFIG = 'twitch_api.config_log'

try:
    from twitch_api.local_config import *  # noqa: F401,F403
except ImportError:
    pass
