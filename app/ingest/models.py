import uuid
from django.db import models
from django.utils import timezone


class TicketSource(models.Model):
    """External ticketing system a dump originates from (Remedy, ServiceNow, ...)."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'ticket_source'
        ordering = ['name']

    def __str__(self):
        return self.name


class UploadSession(models.Model):
    """
    One batch run over an uploaded export.
    Created by the caller before the batch starts; processed_rows advances as
    rows are handled and status is finalized when the batch ends.
    """
    STATUS_PROCESSING = 'processing'
    STATUS_COMPLETED = 'completed'
    STATUS_FAILED = 'failed'
    STATUS_CHOICES = [
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_FAILED, 'Failed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_email = models.CharField(max_length=255, blank=True,
                                  help_text="Identity of the caller who started the upload")
    source = models.ForeignKey(TicketSource, on_delete=models.PROTECT, related_name='upload_sessions')
    file_name = models.CharField(max_length=255)

    total_rows = models.IntegerField(default=0)
    processed_rows = models.IntegerField(default=0)
    inserted_rows = models.IntegerField(default=0)
    updated_rows = models.IntegerField(default=0)
    failed_rows = models.IntegerField(default=0)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PROCESSING)
    error_message = models.TextField(blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'upload_session'
        indexes = [
            models.Index(fields=['status'], name='upload_sess_status_idx'),
            models.Index(fields=['user_email'], name='upload_sess_user_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.source.name}:{self.file_name} ({self.status})"
