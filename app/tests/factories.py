import uuid
from pathlib import Path

SAMPLE_DATA = Path(__file__).parent / 'sample_data'
REMEDY_EXPORT = SAMPLE_DATA / 'remedy_export.csv'

PROJECT_A = uuid.UUID('11111111-1111-1111-1111-111111111111')
PROJECT_B = uuid.UUID('22222222-2222-2222-2222-222222222222')


def make_record(incident_id='INC1000', **fields):
    """Raw export record with sensible defaults for a valid ticket."""
    record = {
        'incident_id': incident_id,
        'priority': 'INC',
        'assigned_support_organization': 'IT Support Team A',
        'assignee': 'john.doe',
        'status': 'Assigned',
        'summary': 'Something broke',
        'reported_date1': '08/18/2025, 07:11:50 PM',
        'mttr': '01:00:00',
        'mtti': '00:10:00',
    }
    record.update(fields)
    return record
