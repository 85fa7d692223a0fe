"""Channel list resolver.

The channel setting is free text entered by a human, e.g.:
    #general
    #general,#news,@alice
"""

from __future__ import annotations

from typing import List, Optional

CHANNEL_DELIMITER = ","


def resolve_channels(raw: Optional[str]) -> List[str]:
    """
    Split a raw channel setting into the channels to fan out to.

    Tokens are kept exactly as entered: no trimming, no de-dup and no
    filtering of empty tokens. A value without a delimiter is returned as a
    single channel, so the result is never empty.
    """
    raw = raw or ""
    if CHANNEL_DELIMITER not in raw:
        return [raw]

    channels = raw.split(CHANNEL_DELIMITER)
    if len(channels) == 1:
        return [raw]

    return channels
