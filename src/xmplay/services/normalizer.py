"""Flatten raw track records into display records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, tzinfo

from xmplay.core.models import UNKNOWN, NormalizedTrack, RawTrackRecord


def normalize(
    record: RawTrackRecord,
    link_site: str,
    tz: tzinfo | None = None,
) -> NormalizedTrack:
    """
    Convert one raw record into a NormalizedTrack.

    Missing or unparsable fields degrade to UNKNOWN instead of raising.

    Args:
        record: Track record from a playlist page
        link_site: Music service whose link should be picked (exact match)
        tz: Time zone for the timestamp; defaults to the local zone

    Returns:
        The flattened track
    """
    return NormalizedTrack(
        artist=", ".join(record.artists) if record.artists else UNKNOWN,
        title=record.title or UNKNOWN,
        link=pick_link(record, link_site),
        timestamp=parse_timestamp(record.timestamp, tz),
        channel_id=record.channel_id,
    )


def normalize_all(
    records: Iterable[RawTrackRecord],
    link_site: str,
    tz: tzinfo | None = None,
) -> list[NormalizedTrack]:
    """Normalize records, keeping their order."""
    return [normalize(record, link_site, tz) for record in records]


def pick_link(record: RawTrackRecord, link_site: str) -> str | None:
    """Return the URL of the first link for ``link_site``, or None."""
    for link in record.links:
        if link.site == link_site:
            return link.url
    return None


def parse_timestamp(value: str | None, tz: tzinfo | None = None) -> datetime | str:
    """Parse an ISO-8601 UTC timestamp into the given (or local) time zone."""
    if not value:
        return UNKNOWN

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return UNKNOWN

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)

    try:
        return parsed.astimezone(tz)
    except (OverflowError, ValueError):
        return UNKNOWN
