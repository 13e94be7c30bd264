from django.db import transaction
from pipeline.fields import RESOLUTION_DURATION_FIELD, RESPONSE_DURATION_FIELD
from pipeline.models import Ticket
from pipeline.temporal import parse_duration_minutes, parse_duration_seconds


def derive_metrics(attrs):
    """
    Return a copy of attrs with seconds/minutes companions for the response
    (mtti) and resolution (mttr) durations. Unparseable durations leave the
    companions as None.
    """
    derived = dict(attrs)
    for name in (RESOLUTION_DURATION_FIELD, RESPONSE_DURATION_FIELD):
        raw = attrs.get(name)
        derived[f'{name}_seconds'] = parse_duration_seconds(raw)
        derived[f'{name}_minutes'] = parse_duration_minutes(raw)
    return derived


def recompute_stored_metrics():
    """
    Re-derive duration companions for stored tickets from their stored
    originals. Returns the number of tickets rewritten.
    """
    companion_fields = [
        f'{name}_{unit}'
        for name in (RESOLUTION_DURATION_FIELD, RESPONSE_DURATION_FIELD)
        for unit in ('seconds', 'minutes')
    ]
    updated = 0
    tickets = Ticket.objects.filter(mttr__isnull=False) | Ticket.objects.filter(mtti__isnull=False)
    for ticket in tickets.only('id', RESOLUTION_DURATION_FIELD, RESPONSE_DURATION_FIELD, *companion_fields):
        derived = derive_metrics({
            RESOLUTION_DURATION_FIELD: ticket.mttr,
            RESPONSE_DURATION_FIELD: ticket.mtti,
        })
        changed = [name for name in companion_fields if getattr(ticket, name) != derived[name]]
        if not changed:
            continue
        for name in changed:
            setattr(ticket, name, derived[name])
        with transaction.atomic():
            ticket.save(update_fields=changed)
        updated += 1
    return updated
