import uuid
from django.db import models
from django.utils import timezone
from ingest.models import TicketSource


class OrganizationMapping(models.Model):
    """Routes tickets whose organization value matches to an internal project."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    source = models.ForeignKey(TicketSource, on_delete=models.CASCADE, related_name='organization_mappings')
    project_id = models.UUIDField(db_index=True, help_text="Internal project identifier")
    source_organization_field = models.CharField(max_length=255, default='Assigned_Support_Organization')
    source_organization_value = models.CharField(max_length=500, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'organization_mapping'
        constraints = [
            models.UniqueConstraint(
                fields=['source', 'project_id', 'source_organization_value'],
                name='unique_organization_mapping'
            )
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.source.name}:{self.source_organization_value} -> {self.project_id}"


class UserMapping(models.Model):
    """Project-scoped assignee -> user email rule, hanging off an organization mapping."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mapping = models.ForeignKey(OrganizationMapping, on_delete=models.CASCADE, related_name='user_mappings')
    user_email = models.CharField(max_length=255, db_index=True)
    source_assignee_field = models.CharField(max_length=255, default='Assignee')
    source_assignee_value = models.CharField(max_length=500, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'user_mapping'
        constraints = [
            models.UniqueConstraint(
                fields=['mapping', 'user_email', 'source_assignee_value'],
                name='unique_user_mapping'
            )
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.source_assignee_value} -> {self.user_email}"


class MasterUserMapping(models.Model):
    """Source-wide assignee -> user email rule, consulted before project-scoped ones."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    source = models.ForeignKey(TicketSource, on_delete=models.CASCADE, related_name='master_user_mappings')
    source_assignee_value = models.CharField(max_length=500)
    mapped_user_email = models.CharField(max_length=255, db_index=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'master_user_mapping'
        constraints = [
            models.UniqueConstraint(
                fields=['source', 'source_assignee_value'],
                name='unique_master_user_mapping'
            )
        ]
        indexes = [
            models.Index(fields=['source', 'is_active'], name='master_map_source_active_idx'),
        ]
        ordering = ['source_assignee_value']

    def __str__(self):
        return f"{self.source_assignee_value} -> {self.mapped_user_email}"
