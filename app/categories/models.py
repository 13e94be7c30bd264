import uuid
from django.db import models
from django.utils import timezone


class ProjectCategory(models.Model):
    """Work category of a project; `options` is the legacy JSON list of choices."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project_id = models.UUIDField(db_index=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    options = models.JSONField(default=list, blank=True,
                               help_text="Legacy option list, superseded by CategoryOption")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'project_category'
        ordering = ['name']

    def __str__(self):
        return self.name


class CategoryOption(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.ForeignKey(ProjectCategory, on_delete=models.CASCADE, related_name='option_rows')
    option_name = models.CharField(max_length=255)
    option_value = models.CharField(max_length=255)
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'category_option'
        constraints = [
            models.UniqueConstraint(
                fields=['category', 'option_value'],
                name='unique_category_option'
            )
        ]
        ordering = ['category', 'sort_order']

    def __str__(self):
        return f"{self.category.name}: {self.option_value}"


class CategoryOptionMigration(models.Model):
    """
    Ledger of categories already moved to CategoryOption rows.
    Keyed by source identity so the migration job can be re-run safely.
    """
    source_key = models.CharField(max_length=255, primary_key=True,
                                  help_text="e.g., project_category:<uuid>")
    option_count = models.IntegerField(default=0)
    migrated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'category_option_migration'
        ordering = ['-migrated_at']

    def __str__(self):
        return f"{self.source_key} ({self.option_count} options)"
