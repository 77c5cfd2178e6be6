from django.contrib import admin

from filebook.models import Branch


@admin.register(Branch)
class BranchAdmin(admin.ModelAdmin):
    list_display = ['name', 'contact', 'website']
    search_fields = ['name', 'address', 'contact']
