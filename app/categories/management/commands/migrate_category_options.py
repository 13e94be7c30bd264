from django.core.management.base import BaseCommand
from categories.migrate import migrate_all_categories


class Command(BaseCommand):
    help = 'One-shot move of legacy category options into the category_option table'

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING('=== Migrating category options ==='))
        migrated, options_written, skipped = migrate_all_categories()
        self.stdout.write(self.style.SUCCESS(
            f'  Categories migrated: {migrated} ({options_written} options)'
        ))
        self.stdout.write(f'  Already migrated, skipped: {skipped}')
