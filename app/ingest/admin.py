from django.contrib import admin
from .models import TicketSource, UploadSession


@admin.register(TicketSource)
class TicketSourceAdmin(admin.ModelAdmin):
    list_display = ['name', 'description', 'created_at']
    search_fields = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(UploadSession)
class UploadSessionAdmin(admin.ModelAdmin):
    list_display = ['file_name', 'source', 'status', 'total_rows', 'processed_rows',
                    'inserted_rows', 'updated_rows', 'failed_rows', 'created_at']
    list_filter = ['status', 'source']
    search_fields = ['file_name', 'user_email']
    readonly_fields = ['id', 'processed_rows', 'inserted_rows', 'updated_rows', 'failed_rows',
                       'error_message', 'created_at', 'updated_at', 'completed_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
