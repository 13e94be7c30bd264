from django.contrib import admin
from .models import ProjectCategory, CategoryOption, CategoryOptionMigration


class CategoryOptionInline(admin.TabularInline):
    model = CategoryOption
    extra = 0


@admin.register(ProjectCategory)
class ProjectCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'project_id', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at']
    inlines = [CategoryOptionInline]


@admin.register(CategoryOptionMigration)
class CategoryOptionMigrationAdmin(admin.ModelAdmin):
    list_display = ['source_key', 'option_count', 'migrated_at']
    readonly_fields = ['source_key', 'option_count', 'migrated_at']
