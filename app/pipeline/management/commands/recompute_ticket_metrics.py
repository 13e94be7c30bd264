from django.core.management.base import BaseCommand
from pipeline.metrics import recompute_stored_metrics


class Command(BaseCommand):
    help = 'Re-derive MTTR/MTTI seconds and minutes from the stored duration strings'

    def handle(self, *args, **options):
        self.stdout.write('Recomputing ticket duration metrics...')
        updated = recompute_stored_metrics()
        self.stdout.write(self.style.SUCCESS(f'  Tickets updated: {updated}'))
