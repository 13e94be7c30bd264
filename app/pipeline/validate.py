from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from django.conf import settings

from pipeline.fields import BUSINESS_KEY, PRIMARY_DATE_FIELD, PRIORITY_FIELD
from pipeline.models import Ticket
from pipeline.temporal import parse_timestamp

MISSING_KEY = 'MissingKey'
DUPLICATE_KEY = 'DuplicateKey'
INVALID_ENUM = 'InvalidEnum'
INVALID_DATE = 'InvalidDate'


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[str] = None
    detail: str = ''


VALID = ValidationResult(ok=True)


def validate_record(
    record: Mapping[str, Optional[str]],
    is_update: bool = True,
    priority_codes: Optional[Iterable[str]] = None,
    tz=None,
) -> ValidationResult:
    """
    Validate a normalized record. First failing rule wins:
    1. business key present
    2. key not already stored (insert-only mode, is_update=False)
    3. priority code in the configured set, when given
    4. primary date parseable, when given
    Reads the ticket table for rule 2 but never writes.
    """
    incident_id = record.get(BUSINESS_KEY)
    if incident_id is None or not incident_id.strip():
        return ValidationResult(False, MISSING_KEY, 'Incident ID is required')

    if not is_update and Ticket.objects.filter(incident_id=incident_id).exists():
        return ValidationResult(False, DUPLICATE_KEY, f'Incident ID already exists: {incident_id}')

    priority = record.get(PRIORITY_FIELD)
    if priority is not None:
        allowed = settings.TICKET_PRIORITY_CODES if priority_codes is None else priority_codes
        if priority not in set(allowed):
            return ValidationResult(False, INVALID_ENUM, f'Invalid priority value: {priority}')

    reported = record.get(PRIMARY_DATE_FIELD)
    if reported is not None and parse_timestamp(reported, tz=tz) is None:
        return ValidationResult(False, INVALID_DATE, f'Invalid reported date format: {reported}')

    return VALID
