"""
Channel constants for the sdklog severity system.

Channels are ordered from most to least severe. The position in
CHANNELS is the channel's precedence; the emit rule is simple:

    precedence(channel) <= precedence(threshold)  ->  message is shown

Channel axis:
    <-- severe ------------ default ------------ verbose -->
     0       1       2       3       4       5
    error   warn    info    log     debug   trace

Each channel also belongs to a sink class, which decides where its
output goes:
    error, warn         -> error-class destination
    info, log, debug    -> info-class destination
    trace               -> error-class destination, plus a stack capture
"""

from enum import Enum


class Channel(str, Enum):
    """A named severity channel."""
    ERROR = 'error'
    WARN = 'warn'
    INFO = 'info'
    LOG = 'log'
    DEBUG = 'debug'
    TRACE = 'trace'

    def __str__(self) -> str:
        return self.value


# Highest severity first. Order is precedence.
CHANNELS = tuple(Channel)

DEFAULT_CHANNEL = Channel.INFO

# Width the channel tag is padded to in the prefix block
CHANNEL_WIDTH = max(len(ch.value) for ch in CHANNELS)

# Sink classes
ERROR_CLASS = 'error'
STANDARD_CLASS = 'standard'
TRACE_CLASS = 'trace'

CHANNEL_CLASSES = {
    Channel.ERROR: ERROR_CLASS,
    Channel.WARN: ERROR_CLASS,
    Channel.INFO: STANDARD_CLASS,
    Channel.LOG: STANDARD_CLASS,
    Channel.DEBUG: STANDARD_CLASS,
    Channel.TRACE: TRACE_CLASS,
}

CHANNEL_DESCRIPTIONS = {
    Channel.ERROR: 'Failures, always shown',
    Channel.WARN:  'Recoverable problems',
    Channel.INFO:  'Default progress output',
    Channel.LOG:   'Secondary detail',
    Channel.DEBUG: 'Internal state dumps',
    Channel.TRACE: 'Detail with call-stack capture',
}
