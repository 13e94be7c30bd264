"""
Batch orchestration: drives every record of an export through
normalize -> validate -> resolve -> derive -> merge and summarizes the run.

Each record is merged in its own transaction, so a batch can partially
succeed; a failing record is recorded and the batch moves on.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Mapping, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from ingest.models import UploadSession
from mappings.resolve import resolve_record
from pipeline.fields import BUSINESS_KEY, build_ticket_attributes
from pipeline.merge import INSERTED, merge_ticket
from pipeline.metrics import derive_metrics
from pipeline.normalize import normalize_record
from pipeline.validate import validate_record

logger = logging.getLogger(__name__)


@dataclass
class RecordError:
    incident_id: Optional[str]
    reason: str
    detail: str = ''


@dataclass
class BatchResult:
    inserted: int = 0
    updated: int = 0
    failed: int = 0
    errors: List[RecordError] = field(default_factory=list)

    @property
    def processed(self):
        return self.inserted + self.updated + self.failed

    def record_failure(self, incident_id, reason, detail=''):
        self.failed += 1
        self.errors.append(RecordError(incident_id, reason, detail))

    def as_dict(self):
        return asdict(self)


def ingest_records(
    records: Iterable[Mapping[str, Optional[str]]],
    source,
    session: Optional[UploadSession] = None,
    insert_only: bool = False,
    priority_codes=None,
    tz=None,
) -> BatchResult:
    """
    Ingest raw records for a ticket source, in input order.

    insert_only rejects keys that are already stored (DuplicateKey) instead
    of updating them. When a session is given its row counters advance after
    every record and its status is finalized at the end.
    """
    result = BatchResult()
    logger.info('Starting ticket batch for source %s (insert_only=%s)', source, insert_only)

    try:
        for raw_record in records:
            _ingest_one(raw_record, source, result, insert_only, priority_codes, tz)
            if session is not None:
                _record_progress(session, result)
    except Exception as e:
        if session is not None:
            _finish_session(session, result, failure=str(e))
        raise

    if session is not None:
        _finish_session(session, result)

    logger.info(
        'Finished ticket batch for source %s: %d inserted, %d updated, %d failed',
        source, result.inserted, result.updated, result.failed,
    )
    return result


def _ingest_one(raw_record, source, result, insert_only, priority_codes, tz):
    record = normalize_record(raw_record)
    incident_id = record.get(BUSINESS_KEY)

    validation = validate_record(record, is_update=not insert_only,
                                 priority_codes=priority_codes, tz=tz)
    if not validation.ok:
        logger.warning('Rejected record %r: %s', incident_id, validation.detail)
        result.record_failure(incident_id, validation.reason, validation.detail)
        return

    try:
        with transaction.atomic():
            resolution = resolve_record(source, record)
            attributes = derive_metrics(build_ticket_attributes(record, tz=tz))
            attributes.update(
                source=source,
                mapping=resolution.mapping,
                project_id=resolution.project_id,
                mapped_user_email=resolution.user_email,
            )
            _, outcome = merge_ticket(incident_id, attributes)
    except DatabaseError as e:
        logger.warning('Failed to merge record %r: %s', incident_id, e)
        result.record_failure(incident_id, str(e))
        return

    if outcome == INSERTED:
        result.inserted += 1
    else:
        result.updated += 1


def _record_progress(session, result):
    session.processed_rows = result.processed
    session.inserted_rows = result.inserted
    session.updated_rows = result.updated
    session.failed_rows = result.failed
    session.updated_at = timezone.now()
    session.save(update_fields=[
        'processed_rows', 'inserted_rows', 'updated_rows', 'failed_rows', 'updated_at',
    ])


def _finish_session(session, result, failure=None):
    """Set the terminal status: failed on abort or when every row failed."""
    _record_progress(session, result)

    all_failed = result.processed > 0 and result.failed == result.processed
    if failure is not None or all_failed:
        session.status = UploadSession.STATUS_FAILED
    else:
        session.status = UploadSession.STATUS_COMPLETED

    messages = [f'{err.incident_id or "<missing>"}: {err.detail or err.reason}' for err in result.errors]
    if failure is not None:
        messages.append(failure)
    session.error_message = '\n'.join(messages)
    session.completed_at = timezone.now()
    session.save(update_fields=['status', 'error_message', 'completed_at'])
