from django.contrib import admin

from filebook.models import Sender


@admin.register(Sender)
class SenderAdmin(admin.ModelAdmin):
    """
    ✉️ Отправители. Создаются и удаляются только вместе с входящим.
    """
    list_display = ['name', 'sender_type', 'email', 'phone', 'inward']
    list_select_related = ['inward']
    search_fields = ['name', 'email', 'phone', 'inward__title']

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
