"""
📥 Resource для экспорта реестра входящих
"""
from import_export import resources, fields

from filebook.models import Inward


class InwardResource(resources.ModelResource):
    """
    📊 Реестр входящих: отправитель по имени, вложения - количеством.
    """
    sender_name = fields.Field(column_name='sender_name', readonly=True)
    sender_type = fields.Field(column_name='sender_type', readonly=True)
    documents_count = fields.Field(column_name='documents_count', readonly=True)

    class Meta:
        model = Inward
        fields = (
            'id', 'title', 'inward_type', 'mode', 'received_date', 'status', 'remarks',
            'sender_name', 'sender_type', 'documents_count',
        )
        export_order = fields

    def dehydrate_sender_name(self, inward):
        sender = inward.sender_or_none
        return sender.name if sender else ''

    def dehydrate_sender_type(self, inward):
        sender = inward.sender_or_none
        return sender.sender_type if sender else ''

    def dehydrate_documents_count(self, inward):
        return inward.documents.count()
