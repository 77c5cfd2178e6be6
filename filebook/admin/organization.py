from django.contrib import admin

from filebook.models import Organization


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """
    🏢 Админ-класс для модели Organization
    """
    list_display = ['name', 'contact', 'website', 'pr_contact']
    search_fields = ['name', 'address', 'contact', 'website']
