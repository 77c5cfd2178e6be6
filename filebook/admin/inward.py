import logging

from django.contrib import admin, messages
from import_export.admin import ExportMixin

from filebook.constants import INWARD_STATUSES
from filebook.forms import InwardForm
from filebook.models import Inward, Sender, Document
from filebook.resources import InwardResource
from filebook.scopes import INWARD_SCOPES
from .filters import scope_filters
from .mixins import PrimaryKeySearchMixin, FileBookMediaMixin

logger = logging.getLogger(__name__)


class SenderInline(admin.StackedInline):
    """
    ✉️ Отправитель входящего (ровно один).
    """
    model = Sender
    extra = 1
    max_num = 1
    can_delete = False
    verbose_name_plural = "Received From"
    fieldsets = (
        (None, {
            'fields': (
                ('sender_type', 'name'),
                ('email', 'phone'),
                'address',
            )
        }),
    )


class DocumentInline(admin.TabularInline):
    """
    📎 Вложения входящего.
    """
    model = Document
    extra = 1
    fields = ['name', 'attachment']


def make_status_action(status):
    def action(modeladmin, request, queryset):
        updated = queryset.update(status=status)
        logger.info("%s marked %s inward(s) as %s", request.user, updated, status)
        modeladmin.message_user(request, f"Статус «{status}» установлен: {updated}", messages.SUCCESS)

    action.__name__ = f"mark_{status.lower().replace(' ', '_')}"
    action.short_description = f"Отметить как «{status}»"
    return action


@admin.register(Inward)
class InwardAdmin(FileBookMediaMixin, PrimaryKeySearchMixin, ExportMixin, admin.ModelAdmin):
    """
    📥 Входящие.

    Форма создания: заголовок, раздел "Inward Details", отправитель, статус,
    вложения. Форма редактирования - то же без статуса (статус меняется
    действиями списка). В списке нет вложений и примечаний.
    """
    form = InwardForm
    resource_classes = [InwardResource]
    inlines = [SenderInline, DocumentInline]

    list_display = ['id', 'title', 'sender_display', 'inward_type', 'mode', 'received_date', 'status']
    list_display_links = ['id', 'title']
    list_filter = scope_filters(INWARD_SCOPES) + ['received_date']
    search_fields = ['title', 'sender__name']
    date_hierarchy = 'received_date'
    actions = [make_status_action(status) for status in INWARD_STATUSES]

    add_fieldsets = (
        (None, {'fields': ('title',)}),
        ('Inward Details', {
            'fields': (
                ('inward_type', 'mode'),
                'received_date',
                'remarks',
            )
        }),
        (None, {'fields': ('status',)}),
    )
    fieldsets = (
        (None, {'fields': ('title',)}),
        ('Inward Details', {
            'fields': (
                ('inward_type', 'mode'),
                'received_date',
                'remarks',
            )
        }),
    )

    def get_fieldsets(self, request, obj=None):
        if obj is None:
            return self.add_fieldsets
        return super().get_fieldsets(request, obj)

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('sender')

    def sender_display(self, obj):
        sender = obj.sender_or_none
        return sender.name if sender else ''

    sender_display.short_description = 'Sender'
    sender_display.admin_order_field = 'sender__name'

    def get_deleted_objects(self, objs, request):
        # Отправитель удаляется вместе с входящим, отдельное право на него не нужно
        deleted_objects, model_count, perms_needed, protected = super().get_deleted_objects(objs, request)
        perms_needed.discard(Sender._meta.verbose_name)
        return deleted_objects, model_count, perms_needed, protected
