# Generated migration

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('ingest', '0001_initial'),
        ('mappings', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Ticket',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('incident_id', models.CharField(max_length=255, unique=True)),
                ('source', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='tickets', to='ingest.ticketsource')),
                ('mapping', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tickets', to='mappings.organizationmapping')),
                ('project_id', models.UUIDField(null=True, blank=True, db_index=True, help_text="Resolved project; NULL when unmapped")),
                ('mapped_user_email', models.CharField(max_length=255, null=True, blank=True, db_index=True, help_text="Resolved user; NULL when unmapped")),
                ('priority', models.CharField(max_length=50, null=True, blank=True, db_index=True)),
                ('region', models.CharField(max_length=255, null=True, blank=True)),
                ('assigned_support_organization', models.CharField(max_length=500, null=True, blank=True)),
                ('assigned_group', models.CharField(max_length=500, null=True, blank=True)),
                ('vertical', models.CharField(max_length=255, null=True, blank=True)),
                ('sub_vertical', models.CharField(max_length=255, null=True, blank=True)),
                ('owner_support_organization', models.CharField(max_length=500, null=True, blank=True)),
                ('owner_group', models.CharField(max_length=500, null=True, blank=True)),
                ('owner', models.CharField(max_length=255, null=True, blank=True)),
                ('reported_source', models.CharField(max_length=255, null=True, blank=True)),
                ('user_name', models.CharField(max_length=255, null=True, blank=True)),
                ('site_group', models.CharField(max_length=255, null=True, blank=True)),
                ('operational_category_tier_1', models.CharField(max_length=255, null=True, blank=True)),
                ('operational_category_tier_2', models.CharField(max_length=255, null=True, blank=True)),
                ('operational_category_tier_3', models.CharField(max_length=255, null=True, blank=True)),
                ('product_name', models.CharField(max_length=255, null=True, blank=True)),
                ('product_categorization_tier_1', models.CharField(max_length=255, null=True, blank=True)),
                ('product_categorization_tier_2', models.CharField(max_length=255, null=True, blank=True)),
                ('product_categorization_tier_3', models.CharField(max_length=255, null=True, blank=True)),
                ('incident_type', models.CharField(max_length=255, null=True, blank=True)),
                ('summary', models.TextField(null=True, blank=True)),
                ('assignee', models.CharField(max_length=255, null=True, blank=True, db_index=True)),
                ('status', models.CharField(max_length=100, null=True, blank=True, db_index=True)),
                ('status_reason_hidden', models.TextField(null=True, blank=True)),
                ('pending_reason', models.TextField(null=True, blank=True)),
                ('group_transfers', models.IntegerField(null=True, blank=True)),
                ('total_transfers', models.IntegerField(null=True, blank=True)),
                ('department', models.CharField(max_length=255, null=True, blank=True)),
                ('vip', models.BooleanField(null=True, blank=True)),
                ('company', models.CharField(max_length=255, null=True, blank=True)),
                ('vendor_ticket_number', models.CharField(max_length=255, null=True, blank=True)),
                ('reported_to_vendor', models.BooleanField(null=True, blank=True)),
                ('resolution', models.TextField(null=True, blank=True)),
                ('resolver_group', models.CharField(max_length=500, null=True, blank=True)),
                ('reopen_count', models.IntegerField(null=True, blank=True)),
                ('service_desk_1st_assigned_group', models.CharField(max_length=500, null=True, blank=True)),
                ('submitter', models.CharField(max_length=255, null=True, blank=True)),
                ('owner_login_id', models.CharField(max_length=255, null=True, blank=True)),
                ('impact', models.CharField(max_length=100, null=True, blank=True)),
                ('vil_function', models.CharField(max_length=255, null=True, blank=True)),
                ('it_partner', models.CharField(max_length=255, null=True, blank=True)),
                ('reported_date1', models.DateTimeField(null=True, blank=True, db_index=True)),
                ('responded_date', models.DateTimeField(null=True, blank=True)),
                ('last_resolved_date', models.DateTimeField(null=True, blank=True)),
                ('closed_date', models.DateTimeField(null=True, blank=True)),
                ('reopened_date', models.DateTimeField(null=True, blank=True)),
                ('service_desk_1st_assigned_date', models.DateTimeField(null=True, blank=True)),
                ('submit_date', models.DateTimeField(null=True, blank=True)),
                ('report_date', models.DateTimeField(null=True, blank=True)),
                ('mttr', models.CharField(max_length=50, null=True, blank=True, help_text="Time to resolve, as exported")),
                ('mttr_seconds', models.IntegerField(null=True, blank=True)),
                ('mttr_minutes', models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)),
                ('mtti', models.CharField(max_length=50, null=True, blank=True, help_text="Response time to assign, as exported")),
                ('mtti_seconds', models.IntegerField(null=True, blank=True)),
                ('mtti_minutes', models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'ticket',
                'ordering': ['-reported_date1'],
                'indexes': [
                    models.Index(fields=['status', 'reported_date1'], name='ticket_status_reported_idx'),
                    models.Index(fields=['project_id', 'status', 'reported_date1'], name='ticket_project_status_idx'),
                    models.Index(fields=['mapped_user_email', 'status'], name='ticket_user_status_idx'),
                ],
            },
        ),
    ]
