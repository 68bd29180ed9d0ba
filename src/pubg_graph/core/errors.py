from __future__ import annotations


class PubgGraphError(RuntimeError):
    """Base exception for every failure surfaced to GraphQL callers."""


class MissingArgument(PubgGraphError):
    """A required query argument was absent or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Must provide {name}")
        self.name = name


class InvalidArgument(MissingArgument):
    """A query argument was given but falls outside its enumeration."""

    def __init__(self, name: str, value: object) -> None:
        PubgGraphError.__init__(self, f"Must provide a valid {name}, got {value!r}")
        self.name = name
        self.value = value


class MissingCredential(PubgGraphError):
    """No upstream API key is configured."""

    def __init__(self, message: str = "Must provide valid api key") -> None:
        super().__init__(message)


class UpstreamError(PubgGraphError):
    """Base exception for failures talking to the PUBG API."""


class UpstreamTransportError(UpstreamError):
    """Network/timeout/parse failures (not distinguished by HTTP status)."""


class UpstreamDataError(UpstreamError):
    """Upstream answered, but with an empty or malformed JSON:API envelope."""

    default_message = "Request failed: bad request or no data for provided arguments"

    def __init__(self, message: str | None = None, *, path: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if not self.path:
            return message
        return f"{message} | path={self.path}"
