"""
Message formatting for sdklog.

Builds the prefix block, turns payloads into text and lays multi-line
text out under the prefix. The layout of a formatted line is fixed so
captured logs stay comparable across releases:

    <timestamp>|<CHANNEL>[|<prefix>]|<indent><sub-prefix> <payload>

    2017-06-01 12:00:00| INFO|HelloWorld|  <BackGround>  Long long ago.

The channel tag is upper-cased and left-filled with spaces to the width
of the longest channel name. The global prefix field is dropped when
empty, and so is the sub-prefix.
"""

import os
import pprint
import traceback
from enum import Enum

from .levels import CHANNEL_WIDTH

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class MultilineMode(str, Enum):
    """How a payload spanning several lines is laid out.

    INLINE re-indents every continuation line under the first line's
    text. BELOW writes the prefix block on a line of its own and the
    payload underneath, unmodified, as older captured logs have it.
    """
    INLINE = 'inline'
    BELOW = 'below'


def build_prefix(timestamp: str, channel, prefix: str = '', indent: int = 0,
                 sub_prefix: str = '') -> str:
    """Build the prefix block written in front of a message.

    Args:
        timestamp: Pre-formatted timestamp text.
        channel: Channel the message is written on.
        prefix: Global prefix of the logger; omitted when empty.
        indent: Number of indentation spaces; negative counts as zero.
        sub_prefix: Per-message label, rendered as '<label> '.

    Returns:
        The prefix block, always ending in a single separating space.
    """
    tag = str(channel).upper().rjust(CHANNEL_WIDTH)
    parts = [timestamp, tag]
    if prefix:
        parts.append(prefix)
    sub = f"<{sub_prefix}> " if sub_prefix else ''
    parts.append(f"{' ' * max(indent, 0)}{sub} ")
    return '|'.join(parts)


def serialize_payload(payload) -> str:
    """Convert any payload to human-readable text.

    Strings pass through. Bytes are decoded as UTF-8. Exceptions render
    as a traceback when they carry one. Everything else is pretty-printed
    recursively.
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode('utf-8', errors='replace')
    if isinstance(payload, BaseException):
        if payload.__traceback__ is None:
            return ''.join(
                traceback.format_exception_only(type(payload), payload)
            ).rstrip('\n')
        return ''.join(
            traceback.format_exception(type(payload), payload,
                                       payload.__traceback__)
        ).rstrip('\n')
    return pprint.pformat(payload, indent=1, width=80)


def layout_message(prefix_block: str, text: str,
                   mode: MultilineMode = MultilineMode.INLINE) -> str:
    """Join the prefix block and payload text into the final message.

    One trailing newline of text is dropped. Continuation lines are
    aligned per mode.
    """
    if text.endswith('\n'):
        text = text[:-1]
    if '\n' not in text:
        return f"{prefix_block}{text}"
    if MultilineMode(mode) is MultilineMode.BELOW:
        return f"{prefix_block.rstrip()}\n{text}"
    pad = ' ' * len(prefix_block)
    return prefix_block + text.replace('\n', '\n' + pad)


def capture_stack() -> str:
    """Format the caller's stack, skipping frames inside this package."""
    frames = [
        frame for frame in traceback.extract_stack()
        if not os.path.abspath(frame.filename).startswith(_PACKAGE_DIR + os.sep)
    ]
    return 'Trace:\n' + ''.join(traceback.format_list(frames)).rstrip('\n')
