from django import forms

from filebook.models import Inward
from .mixins import KeepOnBlankMixin


class InwardForm(KeepOnBlankMixin, forms.ModelForm):
    """
    📥 Форма входящего. Пустые примечания при редактировании не затирают прежние.
    """
    keep_on_blank = ('remarks',)

    class Meta:
        model = Inward
        fields = ['title', 'inward_type', 'mode', 'received_date', 'remarks', 'status']
        widgets = {
            'remarks': forms.Textarea(attrs={'rows': 4}),
        }
