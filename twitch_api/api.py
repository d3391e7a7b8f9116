import logging
from typing import Optional

from .requesters.asyn import TwitchAPIAsyncRequester
from .requesters.common import TwitchAPIRequester
from .requesters.syn import TwitchAPISyncRequester
from .resources.base import Credentials
from .resources.streams import StreamsResource

log = logging.getLogger(__name__)


class TwitchAPI:
    def __init__(self, requester: TwitchAPIRequester, credentials: Optional[Credentials] = None) -> None:
        self.requester = requester
        self.streams = StreamsResource(requester, credentials)

    def set_auth_access_token(self, access_token: Optional[str]) -> None:
        self.streams.set_auth_access_token(access_token)

    def set_client_id(self, client_id: Optional[str]) -> None:
        self.streams.set_client_id(client_id)

    @classmethod
    def from_config(cls, asynchronous: bool = False) -> 'TwitchAPI':
        from .config import config

        requester_class = TwitchAPIAsyncRequester if asynchronous else TwitchAPISyncRequester
        requester = requester_class(config.BASE_URL, config.API_VERSION)
        log.debug('Twitch API client for %s (v%s), %s.', config.BASE_URL, config.API_VERSION,
                  requester_class.__name__)

        return cls(requester, Credentials(config.AUTH_ACCESS_TOKEN, config.CLIENT_ID))
