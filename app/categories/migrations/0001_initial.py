# Generated migration

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ProjectCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('project_id', models.UUIDField(db_index=True)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('options', models.JSONField(blank=True, default=list, help_text='Legacy option list, superseded by CategoryOption')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'project_category',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='CategoryOption',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('option_name', models.CharField(max_length=255)),
                ('option_value', models.CharField(max_length=255)),
                ('sort_order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='option_rows', to='categories.projectcategory')),
            ],
            options={
                'db_table': 'category_option',
                'ordering': ['category', 'sort_order'],
                'constraints': [
                    models.UniqueConstraint(fields=('category', 'option_value'), name='unique_category_option'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CategoryOptionMigration',
            fields=[
                ('source_key', models.CharField(help_text='e.g., project_category:<uuid>', max_length=255, primary_key=True, serialize=False)),
                ('option_count', models.IntegerField(default=0)),
                ('migrated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'category_option_migration',
                'ordering': ['-migrated_at'],
            },
        ),
    ]
