# Generated migration

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('ingest', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OrganizationMapping',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('project_id', models.UUIDField(db_index=True, help_text='Internal project identifier')),
                ('source_organization_field', models.CharField(default='Assigned_Support_Organization', max_length=255)),
                ('source_organization_value', models.CharField(db_index=True, max_length=500)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('source', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='organization_mappings', to='ingest.ticketsource')),
            ],
            options={
                'db_table': 'organization_mapping',
                'ordering': ['created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('source', 'project_id', 'source_organization_value'), name='unique_organization_mapping'),
                ],
            },
        ),
        migrations.CreateModel(
            name='UserMapping',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('user_email', models.CharField(db_index=True, max_length=255)),
                ('source_assignee_field', models.CharField(default='Assignee', max_length=255)),
                ('source_assignee_value', models.CharField(db_index=True, max_length=500)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('mapping', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='user_mappings', to='mappings.organizationmapping')),
            ],
            options={
                'db_table': 'user_mapping',
                'ordering': ['created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('mapping', 'user_email', 'source_assignee_value'), name='unique_user_mapping'),
                ],
            },
        ),
        migrations.CreateModel(
            name='MasterUserMapping',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('source_assignee_value', models.CharField(max_length=500)),
                ('mapped_user_email', models.CharField(db_index=True, max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('source', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='master_user_mappings', to='ingest.ticketsource')),
            ],
            options={
                'db_table': 'master_user_mapping',
                'ordering': ['source_assignee_value'],
                'indexes': [
                    models.Index(fields=['source', 'is_active'], name='master_map_source_active_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('source', 'source_assignee_value'), name='unique_master_user_mapping'),
                ],
            },
        ),
    ]
