"""Target URI assembly for validated relay destinations."""

from __future__ import annotations

import re
from typing import Final

from .models import RelayTarget
from .validation import DEFAULT_HTTP_PORT, DEFAULT_HTTPS_PORT

_REPEATED_SLASHES: Final[re.Pattern[str]] = re.compile(r"/{2,}")
_OMITTED_PORTS: Final[frozenset[str]] = frozenset({DEFAULT_HTTPS_PORT, DEFAULT_HTTP_PORT})


def domain_build_target_uri(target: RelayTarget) -> str:
    """Build the outbound URI for a validated target.

    The port is omitted when it is literally `443` or `80`, regardless of
    scheme. Runs of slashes after the `://` separator collapse to one.

    Args:
        target: Validated relay destination.

    Returns:
        str: Outbound request URI.
    """

    authority = target.host
    if target.port not in _OMITTED_PORTS:
        authority = f"{authority}:{target.port}"
    return f"{target.scheme}://" + _REPEATED_SLASHES.sub("/", f"{authority}/{target.path}")
