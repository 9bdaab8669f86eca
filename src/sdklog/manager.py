"""
Logger: the sdklog writer and block controller.

Central coordinator for channel-gated, prefix-formatted output. The emit
rule is: a message shows when its channel's precedence is <= the
threshold's precedence (see levels.py for the axis).

Every write follows the same pipeline:
    validate channel -> filter -> serialize -> format -> dispatch -> indent

Blocks are labelled regions bracketed by enter_block()/exit_block().
They are not tracked by identity; each call only moves the shared indent
counter by BLOCK_INDENT, so mismatched calls leave the indentation off.

The logger holds unguarded mutable state (threshold, indent). Callers
sharing an instance across threads must serialize access themselves.
"""

import contextlib
from datetime import datetime
from typing import Any, Callable, Optional

from .channels import channel_class, is_enabled, validate_channel
from .formatter import (
    DEFAULT_TIMESTAMP_FORMAT, MultilineMode, build_prefix, capture_stack,
    layout_message, serialize_payload,
)
from .levels import DEFAULT_CHANNEL, TRACE_CLASS, Channel
from .sinks import FileSink, Sink, console_sink, stream_sink

BLOCK_INDENT = 2


class Logger:
    """Leveled, prefix and indent aware logger.

    All output goes through the injected Sink: error and warn to its
    error-class destination, info, log and debug to its info-class
    destination, trace to the error-class destination with a stack
    capture appended.

    Usage::

        log = Logger(prefix='HelloWorld')
        log.info("I'm telling you something")
        log.enter_block('Story')
        log.info('Long long ago.', 'BackGround')
        log.exit_block('Story')
        log.debug('not shown at the default level')
    """

    def __init__(
        self,
        level=DEFAULT_CHANNEL,
        prefix: str = '',
        indent: int = 0,
        sink: Optional[Sink] = None,
        *,
        multiline=MultilineMode.INLINE,
        indent_when_suppressed: bool = True,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._threshold = validate_channel(level)
        if isinstance(indent, bool) or not isinstance(indent, int):
            raise ValueError(f"indent must be an integer, got {indent!r}")
        self._prefix = serialize_payload(prefix) if prefix else ''
        self.indent = indent
        if sink is None:
            sink = console_sink()
        elif not isinstance(sink, Sink):
            sink = stream_sink(sink)
        self.sink = sink
        self.multiline = MultilineMode(multiline)
        self.indent_when_suppressed = indent_when_suppressed
        self.timestamp_format = timestamp_format
        self.clock = clock

    @classmethod
    def from_config(cls, config, sink=None, **options) -> 'Logger':
        """Build a Logger from a LoggerConfig.

        Keyword options (e.g. ``clock``, ``multiline``) are passed to the
        constructor and take precedence over the config values.
        """
        config = config.validate()
        kwargs = dict(
            level=config.level,
            prefix=config.prefix,
            indent=config.indent,
            multiline=config.multiline,
            indent_when_suppressed=config.indent_when_suppressed,
            timestamp_format=config.timestamp_format,
        )
        kwargs.update(options)
        return cls(sink=sink, **kwargs)

    # -----------------------------------------------------------------
    # Channel filter
    # -----------------------------------------------------------------
    @property
    def threshold(self) -> Channel:
        """The most verbose channel currently emitted."""
        return self._threshold

    @property
    def prefix(self) -> str:
        """Global prefix label applied to every formatted message."""
        return self._prefix

    def set_threshold(self, channel) -> Channel:
        """Change the threshold and return the previous one.

        Raises:
            InvalidChannel: If channel is not a known channel; the
                threshold is left unchanged.
        """
        new = validate_channel(channel)
        previous, self._threshold = self._threshold, new
        return previous

    def is_enabled(self, channel) -> bool:
        """True when messages on channel would be emitted now."""
        return is_enabled(channel, self._threshold)

    # -----------------------------------------------------------------
    # Writer
    # -----------------------------------------------------------------
    def write(self, payload: Any, channel=DEFAULT_CHANNEL, sub_prefix: str = '',
              raw: bool = False, indent_delta: int = 0) -> bool:
        """Format and emit payload on channel if the channel is enabled.

        Args:
            payload: Text or any object; non-text is pretty-printed.
            channel: Channel to write on.
            sub_prefix: Per-message label shown after the indentation.
            raw: Write the serialized payload alone, without metadata.
            indent_delta: Added to the indent after the write.

        Returns:
            True if the message was written, False if filtered out.

        Raises:
            InvalidChannel: Unknown channel; nothing is written.
            SinkWriteFailure: The destination rejected the message; the
                indent is left unchanged.
        """
        channel = validate_channel(channel)
        if not is_enabled(channel, self._threshold):
            if self.indent_when_suppressed:
                self.indent += indent_delta
            return False

        message = self.format(payload, channel, sub_prefix, raw)
        sink_class = channel_class(channel)
        if sink_class == TRACE_CLASS:
            message = f"{message}\n{capture_stack()}"
        self.sink.write(sink_class, message + '\n')
        self.indent += indent_delta
        return True

    def format(self, payload: Any, channel=DEFAULT_CHANNEL,
               sub_prefix: str = '', raw: bool = False) -> str:
        """Render payload as it would be written, without writing it."""
        channel = validate_channel(channel)
        text = serialize_payload(payload)
        if raw:
            return text
        prefix_block = build_prefix(
            self.clock().strftime(self.timestamp_format),
            channel,
            prefix=self._prefix,
            indent=self.indent,
            sub_prefix=serialize_payload(sub_prefix) if sub_prefix else '',
        )
        return layout_message(prefix_block, text, self.multiline)

    def error(self, payload: Any, sub_prefix: str = '') -> bool:
        """Write payload on the error channel."""
        return self.write(payload, Channel.ERROR, sub_prefix)

    def warn(self, payload: Any, sub_prefix: str = '') -> bool:
        """Write payload on the warn channel."""
        return self.write(payload, Channel.WARN, sub_prefix)

    def info(self, payload: Any, sub_prefix: str = '') -> bool:
        """Write payload on the info channel."""
        return self.write(payload, Channel.INFO, sub_prefix)

    def log(self, payload: Any, sub_prefix: str = '') -> bool:
        """Write payload on the log channel."""
        return self.write(payload, Channel.LOG, sub_prefix)

    def debug(self, payload: Any, sub_prefix: str = '') -> bool:
        """Write payload on the debug channel."""
        return self.write(payload, Channel.DEBUG, sub_prefix)

    def trace(self, payload: Any, sub_prefix: str = '') -> bool:
        """Write payload on the trace channel, followed by the call stack."""
        return self.write(payload, Channel.TRACE, sub_prefix)

    def raw(self, payload: Any, channel=DEFAULT_CHANNEL) -> bool:
        """Write payload without timestamp, channel tag or indentation."""
        return self.write(payload, channel, raw=True)

    # -----------------------------------------------------------------
    # Blocks
    # -----------------------------------------------------------------
    def enter_block(self, label, channel=DEFAULT_CHANNEL) -> bool:
        """Announce a block and indent the messages that follow it."""
        return self.write(f"[{label}] Begin...", channel,
                          indent_delta=BLOCK_INDENT)

    def exit_block(self, label, channel=DEFAULT_CHANNEL) -> bool:
        """Announce the end of a block and undo its indentation.

        The marker itself is written at the block's inner indentation.
        """
        return self.write(f"[{label}] Completed!", channel,
                          indent_delta=-BLOCK_INDENT)

    @contextlib.contextmanager
    def block(self, label, channel=DEFAULT_CHANNEL):
        """Context manager pairing enter_block() and exit_block().

        The block is exited even when the body raises.
        """
        self.enter_block(label, channel)
        try:
            yield self
        finally:
            self.exit_block(label, channel)

    def __repr__(self):
        return (f"{type(self).__name__}(level={self._threshold.value!r}, "
                f"prefix={self._prefix!r}, indent={self.indent})")


def file_logger(filename, level=DEFAULT_CHANNEL, prefix: str = '',
                indent: int = 0, **options) -> Logger:
    """Build a Logger writing to log files.

    Args:
        filename: One path for both roles, or an (out, err) pair of paths.
        level, prefix, indent: As for Logger.
        **options: Other Logger keyword options.

    Returns:
        A Logger whose sink is a FileSink. Closing the files is up to the
        caller, via ``logger.sink.close()``.
    """
    return Logger(level=level, prefix=prefix, indent=indent,
                  sink=FileSink(filename), **options)


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[Logger] = None


def init_logger(**options) -> Logger:
    """Initialize the module-level Logger singleton.

    Call once at program startup. Keyword options are passed to Logger;
    a ``config`` keyword takes a LoggerConfig instead.

    Returns:
        The initialized Logger instance
    """
    global _logger
    config = options.pop('config', None)
    if config is not None:
        _logger = Logger.from_config(config, **options)
    else:
        _logger = Logger(**options)
    return _logger


def get_logger() -> Logger:
    """Get the module-level Logger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
