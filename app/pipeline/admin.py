from django.contrib import admin
from .models import Ticket


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ['incident_id', 'priority', 'status', 'assignee', 'mapped_user_email',
                    'project_id', 'reported_date1', 'mttr_minutes', 'updated_at']
    list_filter = ['status', 'priority', 'source']
    search_fields = ['incident_id', 'summary', 'assignee', 'mapped_user_email']
    readonly_fields = ['id', 'source', 'mapping', 'project_id', 'mapped_user_email',
                       'mttr_seconds', 'mttr_minutes', 'mtti_seconds', 'mtti_minutes',
                       'created_at', 'updated_at']
    date_hierarchy = 'reported_date1'
