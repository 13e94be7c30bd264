"""
Read-only reporting over merged tickets: upsert statistics and
MTTR (time to resolve) / MTTI (response time to assign) aggregates.
"""

from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from django.db.models import Avg, Count, F, Max, Min, Q, Sum
from django.db.models.functions import Coalesce, TruncDate
from django.utils import timezone

from pipeline.models import Ticket

MTTR_TARGET_MINUTES = Decimal('30.0')
MTTI_TARGET_MINUTES = Decimal('15.0')

_CENT = Decimal('0.01')

HAS_DURATION = Q(mttr_seconds__isnull=False) | Q(mtti_seconds__isnull=False)


def _round(value):
    if value is None:
        return None
    return Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def _reported_between(queryset, start=None, end=None):
    if start is not None:
        queryset = queryset.filter(reported_date1__gte=start)
    if end is not None:
        queryset = queryset.filter(reported_date1__lte=end)
    return queryset


def upsert_statistics(source=None, start=None, end=None):
    """New vs updated tickets, optionally for one source and an updated_at window."""
    tickets = Ticket.objects.all()
    if source is not None:
        tickets = tickets.filter(source=source)
    if start is not None:
        tickets = tickets.filter(updated_at__gte=start)
    if end is not None:
        tickets = tickets.filter(updated_at__lte=end)

    updated = tickets.exclude(updated_at=F('created_at'))
    total = tickets.count()
    updated_count = updated.count()
    return {
        'total_records': total,
        'new_records': total - updated_count,
        'updated_records': updated_count,
        'updated_incident_ids': sorted(updated.values_list('incident_id', flat=True)),
    }


def mttr_mtti_stats_by_project(project_id=None, start=None, end=None):
    tickets = Ticket.objects.filter(HAS_DURATION, project_id__isnull=False)
    if project_id is not None:
        tickets = tickets.filter(project_id=project_id)
    tickets = _reported_between(tickets, start, end)

    rows = (
        tickets.values('project_id')
        .annotate(
            total_tickets=Count('id'),
            avg_mttr_seconds=Avg('mttr_seconds'),
            avg_mttr_minutes=Avg('mttr_minutes'),
            avg_mtti_seconds=Avg('mtti_seconds'),
            avg_mtti_minutes=Avg('mtti_minutes'),
            min_mttr_minutes=Min('mttr_minutes'),
            max_mttr_minutes=Max('mttr_minutes'),
            min_mtti_minutes=Min('mtti_minutes'),
            max_mtti_minutes=Max('mtti_minutes'),
        )
        .order_by('project_id')
    )

    stats = []
    for row in rows:
        stats.append({
            'project_id': row['project_id'],
            'total_tickets': row['total_tickets'],
            'avg_mttr_seconds': int(row['avg_mttr_seconds']) if row['avg_mttr_seconds'] is not None else None,
            'avg_mttr_minutes': _round(row['avg_mttr_minutes']),
            'avg_mtti_seconds': int(row['avg_mtti_seconds']) if row['avg_mtti_seconds'] is not None else None,
            'avg_mtti_minutes': _round(row['avg_mtti_minutes']),
            'min_mttr_minutes': row['min_mttr_minutes'],
            'max_mttr_minutes': row['max_mttr_minutes'],
            'min_mtti_minutes': row['min_mtti_minutes'],
            'max_mtti_minutes': row['max_mtti_minutes'],
        })
    return stats


def mttr_mtti_stats_by_user(start=None, end=None):
    """Per-user aggregates; the user is the mapped email, else the raw assignee."""
    tickets = _reported_between(Ticket.objects.filter(HAS_DURATION), start, end)
    rows = (
        tickets.annotate(user=Coalesce('mapped_user_email', 'assignee'))
        .filter(user__isnull=False)
        .values('user')
        .annotate(
            total_tickets=Count('id'),
            avg_mttr_minutes=Avg('mttr_minutes'),
            avg_mtti_minutes=Avg('mtti_minutes'),
            total_mttr_minutes=Sum('mttr_minutes'),
            total_mtti_minutes=Sum('mtti_minutes'),
        )
        .order_by('user')
    )

    stats = []
    for row in rows:
        avg_mttr = _round(row['avg_mttr_minutes'])
        if avg_mttr is not None and avg_mttr > 0:
            efficiency = _round(Decimal(100) - avg_mttr / 60)
        else:
            efficiency = Decimal('100.00')
        stats.append({
            'user_email': row['user'],
            'total_tickets': row['total_tickets'],
            'avg_mttr_minutes': avg_mttr,
            'avg_mtti_minutes': _round(row['avg_mtti_minutes']),
            'total_mttr_minutes': row['total_mttr_minutes'],
            'total_mtti_minutes': row['total_mtti_minutes'],
            'efficiency_score': efficiency,
        })
    return stats


def mttr_mtti_trends(project_id=None, days=30):
    """Daily average MTTR/MTTI over the last `days` days of reported tickets."""
    since = timezone.now() - timedelta(days=days)
    tickets = Ticket.objects.filter(HAS_DURATION, reported_date1__gte=since)
    if project_id is not None:
        tickets = tickets.filter(project_id=project_id)

    rows = (
        tickets.annotate(date=TruncDate('reported_date1'))
        .values('date')
        .annotate(
            avg_mttr_minutes=Avg('mttr_minutes'),
            avg_mtti_minutes=Avg('mtti_minutes'),
            ticket_count=Count('id'),
        )
        .order_by('date')
    )
    return [
        {
            'date': row['date'],
            'avg_mttr_minutes': _round(row['avg_mttr_minutes']),
            'avg_mtti_minutes': _round(row['avg_mtti_minutes']),
            'ticket_count': row['ticket_count'],
        }
        for row in rows
    ]


def benchmark_status(avg_minutes, target):
    if avg_minutes is None:
        return 'No Data'
    if avg_minutes <= target:
        return 'Excellent'
    if avg_minutes <= target * 2:
        return 'Good'
    if avg_minutes <= target * 4:
        return 'Fair'
    return 'Needs Improvement'


def performance_benchmarks(project_id=None):
    tickets = Ticket.objects.filter(HAS_DURATION)
    if project_id is not None:
        tickets = tickets.filter(project_id=project_id)
    averages = tickets.aggregate(avg_mttr=Avg('mttr_minutes'), avg_mtti=Avg('mtti_minutes'))

    benchmarks = []
    for metric_name, avg, target in [
        ('MTTR (Minutes)', _round(averages['avg_mttr']), MTTR_TARGET_MINUTES),
        ('MTTI (Minutes)', _round(averages['avg_mtti']), MTTI_TARGET_MINUTES),
    ]:
        percentage = _round(target / avg * 100) if avg else Decimal('0.00')
        benchmarks.append({
            'metric_name': metric_name,
            'current_avg': avg,
            'target_value': target,
            'performance_percentage': percentage,
            'status': benchmark_status(avg, target),
        })
    return benchmarks
