import uuid
from django.db import models
from django.utils import timezone
from ingest.models import TicketSource
from mappings.models import OrganizationMapping


class Ticket(models.Model):
    """
    Canonical ticket merged from external exports.
    One row per incident_id; re-ingesting the same key overwrites every
    attribute. Absent source values are stored as NULL, never as ''.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    incident_id = models.CharField(max_length=255, unique=True)

    # Provenance
    source = models.ForeignKey(TicketSource, on_delete=models.PROTECT, related_name='tickets')
    mapping = models.ForeignKey(OrganizationMapping, on_delete=models.SET_NULL,
                                null=True, blank=True, related_name='tickets')
    project_id = models.UUIDField(null=True, blank=True, db_index=True,
                                  help_text="Resolved project; NULL when unmapped")
    mapped_user_email = models.CharField(max_length=255, null=True, blank=True, db_index=True,
                                         help_text="Resolved user; NULL when unmapped")

    # Descriptive attributes
    priority = models.CharField(max_length=50, null=True, blank=True, db_index=True)
    region = models.CharField(max_length=255, null=True, blank=True)
    assigned_support_organization = models.CharField(max_length=500, null=True, blank=True)
    assigned_group = models.CharField(max_length=500, null=True, blank=True)
    vertical = models.CharField(max_length=255, null=True, blank=True)
    sub_vertical = models.CharField(max_length=255, null=True, blank=True)
    owner_support_organization = models.CharField(max_length=500, null=True, blank=True)
    owner_group = models.CharField(max_length=500, null=True, blank=True)
    owner = models.CharField(max_length=255, null=True, blank=True)
    reported_source = models.CharField(max_length=255, null=True, blank=True)
    user_name = models.CharField(max_length=255, null=True, blank=True)
    site_group = models.CharField(max_length=255, null=True, blank=True)
    operational_category_tier_1 = models.CharField(max_length=255, null=True, blank=True)
    operational_category_tier_2 = models.CharField(max_length=255, null=True, blank=True)
    operational_category_tier_3 = models.CharField(max_length=255, null=True, blank=True)
    product_name = models.CharField(max_length=255, null=True, blank=True)
    product_categorization_tier_1 = models.CharField(max_length=255, null=True, blank=True)
    product_categorization_tier_2 = models.CharField(max_length=255, null=True, blank=True)
    product_categorization_tier_3 = models.CharField(max_length=255, null=True, blank=True)
    incident_type = models.CharField(max_length=255, null=True, blank=True)
    summary = models.TextField(null=True, blank=True)
    assignee = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    status = models.CharField(max_length=100, null=True, blank=True, db_index=True)
    status_reason_hidden = models.TextField(null=True, blank=True)
    pending_reason = models.TextField(null=True, blank=True)
    group_transfers = models.IntegerField(null=True, blank=True)
    total_transfers = models.IntegerField(null=True, blank=True)
    department = models.CharField(max_length=255, null=True, blank=True)
    vip = models.BooleanField(null=True, blank=True)
    company = models.CharField(max_length=255, null=True, blank=True)
    vendor_ticket_number = models.CharField(max_length=255, null=True, blank=True)
    reported_to_vendor = models.BooleanField(null=True, blank=True)
    resolution = models.TextField(null=True, blank=True)
    resolver_group = models.CharField(max_length=500, null=True, blank=True)
    reopen_count = models.IntegerField(null=True, blank=True)
    service_desk_1st_assigned_group = models.CharField(max_length=500, null=True, blank=True)
    submitter = models.CharField(max_length=255, null=True, blank=True)
    owner_login_id = models.CharField(max_length=255, null=True, blank=True)
    impact = models.CharField(max_length=100, null=True, blank=True)
    vil_function = models.CharField(max_length=255, null=True, blank=True)
    it_partner = models.CharField(max_length=255, null=True, blank=True)

    # Dates
    reported_date1 = models.DateTimeField(null=True, blank=True, db_index=True)
    responded_date = models.DateTimeField(null=True, blank=True)
    last_resolved_date = models.DateTimeField(null=True, blank=True)
    closed_date = models.DateTimeField(null=True, blank=True)
    reopened_date = models.DateTimeField(null=True, blank=True)
    service_desk_1st_assigned_date = models.DateTimeField(null=True, blank=True)
    submit_date = models.DateTimeField(null=True, blank=True)
    report_date = models.DateTimeField(null=True, blank=True)

    # Durations: original string plus derived seconds/minutes
    mttr = models.CharField(max_length=50, null=True, blank=True,
                            help_text="Time to resolve, as exported")
    mttr_seconds = models.IntegerField(null=True, blank=True)
    mttr_minutes = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    mtti = models.CharField(max_length=50, null=True, blank=True,
                            help_text="Response time to assign, as exported")
    mtti_seconds = models.IntegerField(null=True, blank=True)
    mtti_minutes = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'ticket'
        indexes = [
            models.Index(fields=['status', 'reported_date1'], name='ticket_status_reported_idx'),
            models.Index(fields=['project_id', 'status', 'reported_date1'], name='ticket_project_status_idx'),
            models.Index(fields=['mapped_user_email', 'status'], name='ticket_user_status_idx'),
        ]
        ordering = ['-reported_date1']

    def __str__(self):
        return f"{self.incident_id} ({self.status or 'no status'})"
