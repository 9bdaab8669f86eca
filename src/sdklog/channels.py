"""
Channel registry and filter.

Validates channel identifiers at the boundary and answers the one
question the writer asks before doing any work: is this channel enabled
under the current threshold?

Only `Channel` members and their exact lower-case names are accepted.
Numeric indices, upper-case names and anything else are rejected with
InvalidChannel rather than coerced, since logging to the wrong channel
is worse than failing loudly.
"""

from .errors import InvalidChannel
from .levels import (
    CHANNELS, CHANNEL_CLASSES, CHANNEL_DESCRIPTIONS, Channel,
)


def validate_channel(value) -> Channel:
    """Return the Channel named by value, or raise InvalidChannel.

    Args:
        value: A Channel member or its lower-case name, e.g. 'warn'.

    Returns:
        The matching Channel member.
    """
    if isinstance(value, Channel):
        return value
    if isinstance(value, str):
        try:
            return Channel(value)
        except ValueError:
            raise InvalidChannel(value) from None
    raise InvalidChannel(value)


def precedence(channel) -> int:
    """Index of channel in CHANNELS (0 is most severe)."""
    return CHANNELS.index(validate_channel(channel))


def is_enabled(channel, threshold) -> bool:
    """True when channel is as severe as, or more severe than, threshold."""
    return precedence(channel) <= precedence(threshold)


def channel_class(channel) -> str:
    """Sink class of a channel: 'error', 'standard' or 'trace'."""
    return CHANNEL_CLASSES[validate_channel(channel)]


def enabled_channels(threshold) -> tuple:
    """All channels shown under threshold, most severe first."""
    return CHANNELS[:precedence(threshold) + 1]


def format_channel_list(threshold=None) -> str:
    """Format the list of channels for display.

    Args:
        threshold: Optional current threshold; enabled channels are
            marked with '*'.

    Returns:
        Formatted string listing all channels with descriptions.
    """
    shown = set(enabled_channels(threshold)) if threshold is not None else set()
    lines = ["Available channels:"]
    max_name = max(len(ch.value) for ch in CHANNELS)
    for ch in CHANNELS:
        mark = "*" if ch in shown else " "
        desc = CHANNEL_DESCRIPTIONS.get(ch, '')
        lines.append(f" {mark}{ch.value:<{max_name}}  {desc} ({CHANNEL_CLASSES[ch]})")
    return "\n".join(lines)
