class TwitchAPIError(Exception):
    pass


class RequestApiError(TwitchAPIError):
    """Non-2xx reply as received from the transport, before the error envelope is parsed."""

    def __init__(self, status_code: int, reason: str = '', body: str = '') -> None:
        super().__init__(f'{status_code} {reason}'.strip())
        self.status_code = status_code
        self.reason = reason
        self.body = body


class ApiError(TwitchAPIError):
    def __init__(self, status_code: int, status_text: str = '', message: str = '') -> None:
        super().__init__(f'{status_code} {status_text}: {message}'.strip(' :'))
        self.status_code = status_code
        self.status_text = status_text
        self.message = message


class TransportError(TwitchAPIError):
    pass


class ResponseParseError(TwitchAPIError):
    pass
