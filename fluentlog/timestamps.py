"""
Timestamp rendering for the ``time`` output field.

A layout is either one of the named RFC 3339 layouts or a strftime
pattern. The empty layout means RFC 3339.
"""

import re
from datetime import datetime, timezone

RFC3339 = "RFC3339"
RFC3339_NANO = "RFC3339Nano"

_NAMED_LAYOUTS = (RFC3339, RFC3339_NANO)

_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(\d{1,9}))?"
    r"(Z|[+-]\d{2}:\d{2})$",
    re.IGNORECASE,
)


def _effective(layout: str) -> str:
    return layout or RFC3339


def _with_zone(when: datetime) -> datetime:
    # Naive datetimes are local time.
    if when.tzinfo is None:
        return when.astimezone()
    return when


def format_timestamp(when: datetime, layout: str = "") -> str:
    """
    Render a datetime with the given layout.

    Args:
        when: The instant to render.
        layout: RFC3339, RFC3339Nano, a strftime pattern, or "" for RFC3339.

    Returns:
        Rendered timestamp text.
    """
    layout = _effective(layout)
    if layout not in _NAMED_LAYOUTS:
        return when.strftime(layout)

    when = _with_zone(when)
    if layout == RFC3339:
        text = when.replace(microsecond=0).isoformat()
    else:
        text = when.isoformat(timespec="microseconds")
        head, _, rest = text.partition(".")
        fraction, offset = rest[:6].rstrip("0"), rest[6:]
        text = f"{head}.{fraction}{offset}" if fraction else f"{head}{offset}"

    if when.utcoffset().total_seconds() == 0:
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(text: str, layout: str = "") -> datetime:
    """
    Parse text produced by format_timestamp with the same layout.

    Args:
        text: Timestamp text.
        layout: The layout it was rendered with.

    Returns:
        Timezone-aware datetime for the named layouts; whatever strptime
        yields for patterns.

    Raises:
        ValueError: If text does not match the layout.
    """
    layout = _effective(layout)
    if layout not in _NAMED_LAYOUTS:
        return datetime.strptime(text, layout)

    match = _RFC3339_RE.match(text)
    if not match:
        raise ValueError(f"timestamp {text!r} is not RFC 3339")

    base, fraction, offset = match.groups()
    micros = (fraction or "").ljust(6, "0")[:6]
    parsed = datetime.fromisoformat(
        f"{base}.{micros}{'+00:00' if offset.upper() == 'Z' else offset}"
    )
    if parsed.utcoffset().total_seconds() == 0:
        parsed = parsed.astimezone(timezone.utc)
    return parsed
