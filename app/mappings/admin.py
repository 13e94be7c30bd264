from django.contrib import admin
from .models import OrganizationMapping, UserMapping, MasterUserMapping


class UserMappingInline(admin.TabularInline):
    model = UserMapping
    extra = 0
    readonly_fields = ['created_at', 'updated_at']


@admin.register(OrganizationMapping)
class OrganizationMappingAdmin(admin.ModelAdmin):
    list_display = ['source_organization_value', 'source', 'project_id', 'created_at']
    list_filter = ['source']
    search_fields = ['source_organization_value']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [UserMappingInline]


@admin.register(MasterUserMapping)
class MasterUserMappingAdmin(admin.ModelAdmin):
    list_display = ['source_assignee_value', 'mapped_user_email', 'source', 'is_active']
    list_filter = ['source', 'is_active']
    search_fields = ['source_assignee_value', 'mapped_user_email']
    readonly_fields = ['id', 'created_at', 'updated_at']
