from decimal import Decimal

import pytest
from django.db import IntegrityError
from ingest.models import UploadSession
from pipeline import batch
from pipeline.batch import ingest_records
from pipeline.models import Ticket
from pipeline.validate import DUPLICATE_KEY, INVALID_DATE, INVALID_ENUM, MISSING_KEY
from tests.factories import PROJECT_A, make_record


@pytest.fixture
def upload_session(remedy):
    return UploadSession.objects.create(source=remedy, file_name='export.csv', user_email='ops@company.com')


@pytest.mark.django_db
class TestBatchIngest:
    """End-to-end record ingestion through the batch orchestrator."""

    def test_inserts_mapped_ticket(self, remedy, team_a_mapping, john_master_mapping):
        result = ingest_records([make_record('INC1', mttr='02:58:25', mtti='00:15:00')], remedy)

        assert (result.inserted, result.updated, result.failed) == (1, 0, 0)
        ticket = Ticket.objects.get(incident_id='INC1')
        assert ticket.source == remedy
        assert ticket.mapping == team_a_mapping
        assert ticket.project_id == PROJECT_A
        assert ticket.mapped_user_email == 'john.doe@company.com'
        assert ticket.mttr == '02:58:25'
        assert ticket.mttr_seconds == 10705
        assert ticket.mttr_minutes == Decimal('178.42')
        assert ticket.mtti_seconds == 900
        assert ticket.mtti_minutes == Decimal('15.00')

    def test_unmapped_ticket_still_stored(self, remedy):
        result = ingest_records([make_record('INC1', assigned_support_organization='Unknown Org',
                                             assignee='stranger')], remedy)

        assert result.inserted == 1
        ticket = Ticket.objects.get(incident_id='INC1')
        assert ticket.mapping is None
        assert ticket.project_id is None
        assert ticket.mapped_user_email is None
        assert ticket.assignee == 'stranger'

    def test_values_are_normalized_and_coerced(self, remedy):
        ingest_records([make_record(
            ' INC1 ',
            summary='"Printer ""jam"" on floor 3"',
            status='   ',
            vip='Yes',
            group_transfers='x',
            reopen_count='2',
        )], remedy)

        ticket = Ticket.objects.get(incident_id='INC1')
        assert ticket.summary == 'Printer "jam" on floor 3'
        assert ticket.status is None, "Blank values are stored as absent"
        assert ticket.vip is True
        assert ticket.group_transfers is None
        assert ticket.reopen_count == 2

    def test_unparseable_duration_keeps_original(self, remedy):
        ingest_records([make_record('INC1', mttr='25:00:00', mtti=None)], remedy)

        ticket = Ticket.objects.get(incident_id='INC1')
        assert ticket.mttr == '25:00:00'
        assert ticket.mttr_seconds is None
        assert ticket.mttr_minutes is None
        assert ticket.mtti is None
        assert ticket.mtti_seconds is None

    def test_oversized_numbers_are_absent(self, remedy):
        result = ingest_records([
            make_record('INC1'),
            make_record('INC2', mttr='99999999999999999999', reopen_count='99999999999999999999'),
            make_record('INC3', mtti='6000000000'),
            make_record('INC4'),
        ], remedy)

        assert (result.inserted, result.failed) == (4, 0), "Oversized values must not abort the batch"
        rows = dict(Ticket.objects.values_list('incident_id', 'mttr_minutes'))
        assert rows['INC2'] is None
        second = Ticket.objects.get(incident_id='INC2')
        assert second.mttr == '99999999999999999999'
        assert second.mttr_seconds is None
        assert second.reopen_count is None
        third = Ticket.objects.get(incident_id='INC3')
        assert third.mtti_seconds is None
        assert third.mtti_minutes is None

    def test_reingest_updates_in_place(self, remedy):
        ingest_records([make_record('INC1', status='Assigned'), make_record('INC2')], remedy)
        result = ingest_records([make_record('INC1', status='Resolved'), make_record('INC2')], remedy)

        assert (result.inserted, result.updated, result.failed) == (0, 2, 0)
        assert Ticket.objects.count() == 2
        assert Ticket.objects.get(incident_id='INC1').status == 'Resolved'

    def test_repeated_key_within_batch(self, remedy):
        result = ingest_records([make_record('INC1', status='Assigned'),
                                 make_record('INC1', status='Closed')], remedy)

        assert (result.inserted, result.updated) == (1, 1)
        assert Ticket.objects.get(incident_id='INC1').status == 'Closed', "Last record wins"

    def test_failures_do_not_stop_the_batch(self, remedy):
        result = ingest_records([
            make_record('INC1'),
            make_record('INC2', priority='BOGUS'),
            make_record(None),
            make_record('INC3', reported_date1='not a date'),
            make_record('INC4'),
        ], remedy)

        assert (result.inserted, result.updated, result.failed) == (2, 0, 3)
        assert result.processed == 5
        assert [(e.incident_id, e.reason) for e in result.errors] == [
            ('INC2', INVALID_ENUM),
            (None, MISSING_KEY),
            ('INC3', INVALID_DATE),
        ]
        assert set(Ticket.objects.values_list('incident_id', flat=True)) == {'INC1', 'INC4'}

    def test_insert_only_rejects_existing_keys(self, remedy):
        ingest_records([make_record('INC1', status='Assigned')], remedy)
        result = ingest_records([make_record('INC1', status='Closed'), make_record('INC2')],
                                remedy, insert_only=True)

        assert (result.inserted, result.updated, result.failed) == (1, 0, 1)
        assert result.errors[0].reason == DUPLICATE_KEY
        assert Ticket.objects.get(incident_id='INC1').status == 'Assigned', "Existing row untouched"

    def test_insert_only_repeated_key_within_batch(self, remedy):
        result = ingest_records([make_record('INC1'), make_record('INC1')], remedy, insert_only=True)
        assert (result.inserted, result.failed) == (1, 1)
        assert result.errors[0].reason == DUPLICATE_KEY

    def test_persistence_error_is_isolated(self, remedy, monkeypatch):
        real_merge = batch.merge_ticket

        def flaky_merge(incident_id, attributes):
            if incident_id == 'INC2':
                raise IntegrityError('value too long for type character varying(50)')
            return real_merge(incident_id, attributes)

        monkeypatch.setattr(batch, 'merge_ticket', flaky_merge)
        result = ingest_records([make_record('INC1'), make_record('INC2'), make_record('INC3')], remedy)

        assert (result.inserted, result.failed) == (2, 1)
        assert result.errors[0].incident_id == 'INC2'
        assert 'value too long' in result.errors[0].reason
        assert not Ticket.objects.filter(incident_id='INC2').exists()

    def test_as_dict(self, remedy):
        result = ingest_records([make_record('INC1'), make_record(None)], remedy)
        summary = result.as_dict()
        assert summary['inserted'] == 1
        assert summary['failed'] == 1
        assert summary['errors'][0]['reason'] == MISSING_KEY


@pytest.mark.django_db
class TestUploadSessionAccounting:
    """Session counters and terminal status."""

    def test_completed_session(self, remedy, upload_session):
        ingest_records([make_record('INC1'), make_record('INC2', priority='BOGUS')],
                       remedy, session=upload_session)

        upload_session.refresh_from_db()
        assert upload_session.status == UploadSession.STATUS_COMPLETED
        assert upload_session.processed_rows == 2
        assert upload_session.inserted_rows == 1
        assert upload_session.updated_rows == 0
        assert upload_session.failed_rows == 1
        assert upload_session.completed_at is not None
        assert 'INC2: Invalid priority value: BOGUS' in upload_session.error_message

    def test_updates_counted(self, remedy, upload_session):
        ingest_records([make_record('INC1')], remedy)
        ingest_records([make_record('INC1')], remedy, session=upload_session)

        upload_session.refresh_from_db()
        assert upload_session.updated_rows == 1
        assert upload_session.error_message == ''

    def test_every_row_failing_fails_the_session(self, remedy, upload_session):
        ingest_records([make_record(None), make_record('INC1', priority='BOGUS')],
                       remedy, session=upload_session)

        upload_session.refresh_from_db()
        assert upload_session.status == UploadSession.STATUS_FAILED
        assert upload_session.failed_rows == 2
        assert '<missing>: Incident ID is required' in upload_session.error_message

    def test_empty_batch_completes(self, remedy, upload_session):
        result = ingest_records([], remedy, session=upload_session)

        assert result.processed == 0
        upload_session.refresh_from_db()
        assert upload_session.status == UploadSession.STATUS_COMPLETED

    def test_unexpected_error_fails_session_and_propagates(self, remedy, upload_session, monkeypatch):
        def broken_merge(incident_id, attributes):
            raise RuntimeError('resolver exploded')

        monkeypatch.setattr(batch, 'merge_ticket', broken_merge)
        with pytest.raises(RuntimeError):
            ingest_records([make_record('INC1')], remedy, session=upload_session)

        upload_session.refresh_from_db()
        assert upload_session.status == UploadSession.STATUS_FAILED
        assert 'resolver exploded' in upload_session.error_message
        assert upload_session.completed_at is not None
