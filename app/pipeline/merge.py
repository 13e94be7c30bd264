from django.utils import timezone
from pipeline.models import Ticket

INSERTED = 'inserted'
UPDATED = 'updated'


def merge_ticket(incident_id, attributes):
    """
    Write-or-replace the ticket keyed by incident_id.

    Every attribute is overwritten with the incoming value (the newest
    ingestion is authoritative). update_or_create locks the existing row and
    the unique constraint on incident_id settles concurrent first inserts, so
    at most one row per key exists.

    Returns (ticket, INSERTED | UPDATED).
    """
    now = timezone.now()
    defaults = dict(attributes, updated_at=now)
    ticket, created = Ticket.objects.update_or_create(
        incident_id=incident_id,
        defaults=defaults,
        create_defaults=dict(defaults, created_at=now),
    )
    return ticket, INSERTED if created else UPDATED
