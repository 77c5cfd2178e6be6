from django.contrib import admin

from filebook.forms import SeatForm
from filebook.models import Seat
from .mixins import related_name_column


@admin.register(Seat)
class SeatAdmin(admin.ModelAdmin):
    """
    💺 Места. В меню не выводятся, открываются из отделов и пользователей.
    Организация, филиал и отдел задаются по имени.
    """
    form = SeatForm

    list_display = ['name', 'code', 'organization_display', 'branch_display', 'department_display']
    list_select_related = ['organization', 'branch', 'department']
    search_fields = ['name', 'code', 'organization__name', 'branch__name', 'department__name']

    fieldsets = (
        (None, {'fields': ('name', 'code')}),
        (None, {'fields': (('organization_name', 'branch_name', 'department_name'),)}),
    )

    organization_display = related_name_column('organization', 'Organization')
    branch_display = related_name_column('branch', 'Branch')
    department_display = related_name_column('department', 'Department')
