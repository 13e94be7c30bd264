"""
Date/time and duration parsing for ticket exports.

Nothing in here raises on bad input: an unparseable value comes back as None
so a single malformed cell degrades to an absent attribute instead of
rejecting the row.
"""

from __future__ import annotations

import re
from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone

from pipeline.normalize import INTEGER_MAX

# Remedy exports: "08/18/2025, 07:11:50 PM"
SOURCE_DATETIME_FORMAT = '%m/%d/%Y, %I:%M:%S %p'

FALLBACK_DATETIME_FORMATS = [
    '%m/%d/%Y %I:%M:%S %p',
    '%m/%d/%Y %H:%M:%S',
    '%m/%d/%Y %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%dT%H:%M:%S',
    '%m/%d/%Y',
    '%Y-%m-%d',
]

_HMS_RE = re.compile(r'(\d+):(\d+):(\d+)')
_MS_RE = re.compile(r'(\d+):(\d+)')
_SECONDS_RE = re.compile(r'\d+')

_MINUTES_QUANTUM = Decimal('0.01')


def source_timezone(name: Optional[str] = None) -> tzinfo:
    return ZoneInfo(name or settings.TICKET_SOURCE_TIMEZONE)


def parse_timestamp(raw: Optional[str], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """
    Parse a source date-time string into an aware datetime.
    The source format is tried first, then the fallbacks, then ISO-8601.
    Naive results are interpreted in the source timezone.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None

    parsed = None
    for fmt in [SOURCE_DATETIME_FORMAT] + FALLBACK_DATETIME_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
            break
        except ValueError:
            continue

    if parsed is None:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, tz or source_timezone())
    return parsed


def parse_duration_seconds(raw: Optional[str]) -> Optional[int]:
    """
    Convert a duration string to whole seconds.
    Shapes, in order: HH:MM:SS (hours 0-23), MM:SS, bare seconds.
    Minutes and seconds must be 0-59. Bare seconds are unsigned: a leading
    sign is rejected, as is anything above the INTEGER column range.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None

    match = _HMS_RE.fullmatch(value)
    if match:
        hours, minutes, seconds = (int(part) for part in match.groups())
        if hours <= 23 and minutes <= 59 and seconds <= 59:
            return hours * 3600 + minutes * 60 + seconds
        return None

    match = _MS_RE.fullmatch(value)
    if match:
        minutes, seconds = (int(part) for part in match.groups())
        if minutes <= 59 and seconds <= 59:
            return minutes * 60 + seconds
        return None

    if _SECONDS_RE.fullmatch(value):
        seconds = int(value)
        return seconds if seconds <= INTEGER_MAX else None

    return None


def parse_duration_minutes(raw: Optional[str]) -> Optional[Decimal]:
    """Duration in minutes, rounded half-up to two decimal places."""
    seconds = parse_duration_seconds(raw)
    if seconds is None:
        return None
    return (Decimal(seconds) / 60).quantize(_MINUTES_QUANTUM, rounding=ROUND_HALF_UP)
