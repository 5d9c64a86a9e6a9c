"""
apps.components.admin
=====================
Admin for categories and components, with CSV/JSON export.
"""

from __future__ import annotations

from django.contrib import admin
from import_export import resources
from import_export.admin import ExportMixin

from .models import Category, Component


class ComponentResource(resources.ModelResource):
    class Meta:
        model = Component
        fields = ("id", "title", "description", "category__title")
        export_order = ("id", "title", "category__title", "description")


class ComponentInline(admin.TabularInline):
    model = Component
    extra = 0
    fields = ("title", "description")


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("title", "component_count", "updated_at")
    search_fields = ("title",)
    inlines = [ComponentInline]

    @admin.display(description="Components")
    def component_count(self, obj: Category) -> int:
        return obj.components.count()


@admin.register(Component)
class ComponentAdmin(ExportMixin, admin.ModelAdmin):
    resource_classes = [ComponentResource]
    list_display = ("title", "category", "updated_at")
    list_filter = ("category",)
    search_fields = ("title", "description")
    list_select_related = ("category",)
    readonly_fields = ("created_at", "updated_at")
