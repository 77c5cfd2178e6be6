"""
📂 Admin для отделов.
"""
from django.contrib import admin
from django.db.models import Count, Q

from filebook.models import Department, Seat


class SeatInline(admin.TabularInline):
    """
    💺 Места отдела.
    """
    model = Seat
    fk_name = 'department'
    extra = 1
    fields = ['name', 'code', 'organization', 'branch']
    verbose_name = "Seat"
    verbose_name_plural = "Seats"


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    inlines = [SeatInline]

    list_display = ['name', 'email', 'phone', 'seats_count']
    search_fields = ['name', 'email', 'phone']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.annotate(
            alive_seats=Count('seats', filter=Q(seats__deleted_at__isnull=True))
        )

    def seats_count(self, obj):
        return obj.alive_seats

    seats_count.short_description = 'Мест'
    seats_count.admin_order_field = 'alive_seats'
