from django.db import migrations


def seed_sources(apps, schema_editor):
    TicketSource = apps.get_model('ingest', 'TicketSource')
    TicketSource.objects.get_or_create(
        name='Remedy',
        defaults={'description': 'BMC Remedy ITSM ticketing system'},
    )


class Migration(migrations.Migration):

    dependencies = [
        ('ingest', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_sources, migrations.RunPython.noop),
    ]
