import csv
import os
from django.core.management.base import BaseCommand, CommandError
from ingest.models import TicketSource, UploadSession
from ingest.readers import read_csv_records
from pipeline.batch import ingest_records


class Command(BaseCommand):
    help = 'Ingest a ticket export CSV into the ticket store'

    def add_arguments(self, parser):
        parser.add_argument('--source', type=str, required=True, help='Ticket source name (e.g., Remedy)')
        parser.add_argument('--file', type=str, required=True, help='CSV file path')
        parser.add_argument('--user', type=str, default='', help='Email of the user running the upload')
        parser.add_argument('--insert-only', action='store_true',
                            help='Reject incident IDs that already exist instead of updating them')

    def handle(self, *args, **options):
        source_name = options['source']
        file_path = options['file']

        try:
            source = TicketSource.objects.get(name=source_name)
        except TicketSource.DoesNotExist:
            raise CommandError(f'Unknown ticket source: {source_name}')

        self.stdout.write(f'Ingesting {file_path} as source {source_name}...')

        try:
            records = read_csv_records(file_path)
        except FileNotFoundError:
            raise CommandError(f'File not found: {file_path}')
        except (csv.Error, UnicodeDecodeError) as e:
            raise CommandError(f'Error reading CSV: {e}')

        session = UploadSession.objects.create(
            user_email=options['user'],
            source=source,
            file_name=os.path.basename(file_path),
            total_rows=len(records),
        )

        result = ingest_records(records, source, session=session, insert_only=options['insert_only'])

        self.stdout.write(self.style.SUCCESS(
            f'{source_name}: {result.inserted} inserted, {result.updated} updated, {result.failed} failed'
        ))
        for error in result.errors[:10]:
            self.stdout.write(self.style.WARNING(
                f'  {error.incident_id or "<missing>"}: {error.reason} {error.detail}'.rstrip()
            ))
        if len(result.errors) > 10:
            self.stdout.write(self.style.WARNING(f'  ... {len(result.errors) - 10} more'))
