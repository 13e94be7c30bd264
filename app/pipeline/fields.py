"""
Ticket attribute catalogue and record -> attribute coercion.

Incoming records are flat dicts keyed by attribute name (see
ingest.readers.canonical_field_name for how export headers get there).
Unknown keys are ignored; missing keys are absent.
"""

from typing import Mapping, Optional

from pipeline.normalize import parse_flag, safe_int
from pipeline.temporal import parse_timestamp

BUSINESS_KEY = 'incident_id'
PRIORITY_FIELD = 'priority'
PRIMARY_DATE_FIELD = 'reported_date1'

TEXT_FIELDS = [
    'priority',
    'region',
    'assigned_support_organization',
    'assigned_group',
    'vertical',
    'sub_vertical',
    'owner_support_organization',
    'owner_group',
    'owner',
    'reported_source',
    'user_name',
    'site_group',
    'operational_category_tier_1',
    'operational_category_tier_2',
    'operational_category_tier_3',
    'product_name',
    'product_categorization_tier_1',
    'product_categorization_tier_2',
    'product_categorization_tier_3',
    'incident_type',
    'summary',
    'assignee',
    'status',
    'status_reason_hidden',
    'pending_reason',
    'department',
    'company',
    'vendor_ticket_number',
    'resolution',
    'resolver_group',
    'service_desk_1st_assigned_group',
    'submitter',
    'owner_login_id',
    'impact',
    'vil_function',
    'it_partner',
]

DATE_FIELDS = [
    'reported_date1',
    'responded_date',
    'last_resolved_date',
    'closed_date',
    'reopened_date',
    'service_desk_1st_assigned_date',
    'submit_date',
    'report_date',
]

INTEGER_FIELDS = [
    'group_transfers',
    'total_transfers',
    'reopen_count',
]

FLAG_FIELDS = [
    'vip',
    'reported_to_vendor',
]

# Human-readable duration originals; companions are derived in pipeline.metrics
RESOLUTION_DURATION_FIELD = 'mttr'
RESPONSE_DURATION_FIELD = 'mtti'
DURATION_FIELDS = [RESOLUTION_DURATION_FIELD, RESPONSE_DURATION_FIELD]


def build_ticket_attributes(record: Mapping[str, Optional[str]], tz=None) -> dict:
    """
    Coerce a normalized record into typed Ticket attributes.
    Every descriptive attribute is present in the result (None when absent)
    so a merge overwrites the full row.
    """
    attrs = {}
    for name in TEXT_FIELDS + DURATION_FIELDS:
        attrs[name] = record.get(name)
    for name in DATE_FIELDS:
        attrs[name] = parse_timestamp(record.get(name), tz=tz)
    for name in INTEGER_FIELDS:
        attrs[name] = safe_int(record.get(name))
    for name in FLAG_FIELDS:
        attrs[name] = parse_flag(record.get(name))
    return attrs
