"""Exceptions raised by sdklog.

Only two things can go wrong in a write: the caller named a channel that
does not exist, or the destination refused the bytes. Suppression by
severity is not an error and is reported through the boolean return of
the emit calls instead.
"""


class SdkLogError(Exception):
    """Base class for sdklog errors."""


class InvalidChannel(SdkLogError, ValueError):
    """An unknown or malformed channel identifier was given."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid channel {value!r}")


class SinkWriteFailure(SdkLogError, OSError):
    """The underlying destination failed to accept a message."""

    def __init__(self, channel, cause):
        self.channel = channel
        super().__init__(f"Failed writing to {channel} sink: {cause}")
