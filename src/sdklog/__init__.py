"""
sdklog - leveled, prefix and indent aware logging.

Public API:
    Logger           - the writer: channel filter, formatting, blocks
    file_logger      - Logger writing to one file or an (out, err) pair
    init_logger      - singleton initialization
    get_logger       - access singleton
    Channel          - severity channels, most severe first
    CHANNELS         - all channels in precedence order
    validate_channel - channel boundary check
    is_enabled       - precedence comparison
    Sink, FileSink   - output destinations
    console_sink     - sys.stdout / sys.stderr sink
    stream_sink      - sink from one stream or an (out, err) pair
    MultilineMode    - layout of multi-line payloads
    LoggerConfig     - configuration object
    resolve_config   - layered config resolution
    trace_calls      - function tracing decorator
    InvalidChannel, SinkWriteFailure - errors
"""

from ._version import __version__, __app_name__
from .levels import Channel, CHANNELS, DEFAULT_CHANNEL
from .channels import (
    validate_channel, is_enabled, precedence, channel_class,
    format_channel_list,
)
from .errors import SdkLogError, InvalidChannel, SinkWriteFailure
from .formatter import MultilineMode
from .sinks import Sink, FileSink, console_sink, stream_sink
from .manager import (
    Logger, file_logger, init_logger, get_logger, BLOCK_INDENT,
)
from .config import LoggerConfig, resolve_config, config_from_env
from .trace import trace_calls

__all__ = [
    '__version__', '__app_name__',
    'Channel', 'CHANNELS', 'DEFAULT_CHANNEL',
    'validate_channel', 'is_enabled', 'precedence', 'channel_class',
    'format_channel_list',
    'SdkLogError', 'InvalidChannel', 'SinkWriteFailure',
    'MultilineMode',
    'Sink', 'FileSink', 'console_sink', 'stream_sink',
    'Logger', 'file_logger', 'init_logger', 'get_logger', 'BLOCK_INDENT',
    'LoggerConfig', 'resolve_config', 'config_from_env',
    'trace_calls',
]
