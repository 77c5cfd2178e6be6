from django.contrib import admin
from django.db.models import Exists, OuterRef, Q
from import_export.admin import ExportMixin

from filebook.forms import UserForm
from filebook.models import User, Address
from filebook.resources import UserResource
from filebook.scopes import USER_SCOPES
from .filters import scope_filters
from .mixins import related_name_column, PrimaryKeySearchMixin, FileBookMediaMixin


class AddressInline(admin.TabularInline):
    """
    📮 Адреса пользователя.
    """
    model = Address
    extra = 1
    fields = ['address', 'city', 'pincode']


@admin.register(User)
class UserAdmin(FileBookMediaMixin, PrimaryKeySearchMixin, ExportMixin, admin.ModelAdmin):
    """
    👤 Пользователи картотеки.

    В списке пароль не показывается, место и подразделения выводятся по имени.
    """
    form = UserForm
    resource_classes = [UserResource]
    inlines = [AddressInline]

    list_display = [
        'name', 'email', 'phone', 'dob', 'gender',
        'seat_display', 'branch_display', 'department_display', 'organization_display',
    ]
    list_filter = scope_filters(USER_SCOPES) + ['role']
    list_select_related = ['seat', 'branch', 'department', 'organization']
    search_fields = ['name', 'email', 'phone']

    fieldsets = (
        (None, {
            'fields': (
                ('name', 'phone'),
                ('email', 'password'),
                ('dob', 'gender'),
                'role',
            )
        }),
        ('Место и подразделение', {
            'fields': (
                ('seat_name', 'department_name'),
                ('branch_name', 'organization_name'),
            )
        }),
    )

    seat_display = related_name_column('seat', 'Seat')
    department_display = related_name_column('department', 'Dept.')
    branch_display = related_name_column('branch', 'Branch')
    organization_display = related_name_column('organization', 'Org.')

    def get_search_results(self, request, queryset, search_term):
        results, may_have_duplicates = super().get_search_results(request, queryset, search_term)
        term = search_term.strip()
        if term:
            # Удалённые адреса не участвуют в поиске
            addresses = Address.objects.filter(user=OuterRef('pk')).filter(
                Q(address__icontains=term) | Q(pincode__icontains=term)
            )
            results |= queryset.filter(Exists(addresses))
        return results, may_have_duplicates
