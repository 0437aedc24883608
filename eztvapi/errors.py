"""Exceptions raised by the eztv API clients."""


class EztvError(Exception):
    """Base class for every error raised by this package."""


class MissingArgument(EztvError, ValueError):
    """A required string argument was empty."""


class InvalidArgument(EztvError, ValueError):
    """A numeric argument was out of range (e.g. page <= 0)."""


class InvalidEndpoint(EztvError):
    """The configured base endpoint is not an absolute http(s) URL."""


class EmptyResponse(EztvError):
    """The server answered with a body too short to be JSON."""


class ShowNotFound(EztvError):
    """The upstream service has no show for the requested id."""


class EpisodeNotFound(EztvError):
    """No episode matches the requested season and episode."""


class MalformedResponse(EztvError):
    """The response body could not be decoded."""


class TransportError(EztvError):
    """The HTTP request failed at the network level."""


class UnexpectedStatus(EztvError):
    """The server answered with a non-2xx status code."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"unexpected status {status_code} for {url}")
        self.status_code = status_code
        self.url = url
