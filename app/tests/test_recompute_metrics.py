from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from pipeline.batch import ingest_records
from pipeline.metrics import derive_metrics, recompute_stored_metrics
from pipeline.models import Ticket
from tests.factories import make_record


class TestDeriveMetrics:

    def test_companions_added(self):
        derived = derive_metrics({'mttr': '02:58:25', 'mtti': '125', 'status': 'Closed'})
        assert derived['mttr_seconds'] == 10705
        assert derived['mttr_minutes'] == Decimal('178.42')
        assert derived['mtti_seconds'] == 125
        assert derived['mtti_minutes'] == Decimal('2.08')
        assert derived['status'] == 'Closed'

    def test_input_not_mutated(self):
        attrs = {'mttr': '00:01:00'}
        derive_metrics(attrs)
        assert attrs == {'mttr': '00:01:00'}

    def test_absent_durations(self):
        derived = derive_metrics({})
        assert derived['mttr_seconds'] is None
        assert derived['mtti_minutes'] is None


@pytest.mark.django_db
class TestRecomputeStoredMetrics:
    """Re-deriving duration companions for stored tickets."""

    def test_nothing_to_do_after_ingest(self, remedy):
        ingest_records([make_record('INC1'), make_record('INC2', mttr=None, mtti=None)], remedy)
        assert recompute_stored_metrics() == 0

    def test_stale_companions_rewritten(self, remedy):
        ingest_records([make_record('INC1', mttr='02:58:25'), make_record('INC2')], remedy)
        Ticket.objects.filter(incident_id='INC1').update(mttr_seconds=None, mttr_minutes=None)
        before = Ticket.objects.get(incident_id='INC1').updated_at

        assert recompute_stored_metrics() == 1

        ticket = Ticket.objects.get(incident_id='INC1')
        assert ticket.mttr_seconds == 10705
        assert ticket.mttr_minutes == Decimal('178.42')
        assert ticket.updated_at == before
        assert recompute_stored_metrics() == 0

    def test_changed_original(self, remedy):
        ingest_records([make_record('INC1', mtti='00:10:00')], remedy)
        Ticket.objects.filter(incident_id='INC1').update(mtti='00:20:00')

        recompute_stored_metrics()

        assert Ticket.objects.get(incident_id='INC1').mtti_seconds == 1200

    def test_command(self, remedy):
        ingest_records([make_record('INC1')], remedy)
        Ticket.objects.update(mttr_seconds=0)

        out = StringIO()
        call_command('recompute_ticket_metrics', stdout=out)
        assert 'Tickets updated: 1' in out.getvalue()
