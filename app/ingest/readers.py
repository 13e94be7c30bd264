import csv
import re

_NON_ALNUM_RE = re.compile(r'[^0-9a-z]+')


def canonical_field_name(header):
    """
    Map an export column header to a ticket attribute name.
    'Assigned Support Organization' -> 'assigned_support_organization'
    'Reported Date1' -> 'reported_date1'
    """
    return _NON_ALNUM_RE.sub('_', (header or '').strip().lower()).strip('_')


def read_csv_records(file_path):
    """
    Read a ticket export CSV into a list of raw records keyed by attribute
    name. Values are left raw; cleaning happens in the pipeline.
    """
    with open(file_path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.reader(f)
        try:
            headers = next(reader)
        except StopIteration:
            return []

        names = [canonical_field_name(h) for h in headers]
        records = []
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            records.append({
                name: (row[idx] if idx < len(row) else None)
                for idx, name in enumerate(names)
                if name
            })
        return records
