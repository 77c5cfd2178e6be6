import logging

from django import forms

from filebook.models import User, Seat, Department, Branch, Organization
from filebook.utils.credentials import encode_password
from .fields import RelatedNameField, CredentialField
from .mixins import RelatedNameFormMixin, KeepOnBlankMixin

logger = logging.getLogger(__name__)


class UserForm(RelatedNameFormMixin, KeepOnBlankMixin, forms.ModelForm):
    """
    👤 Форма пользователя картотеки.

    Пароль не показывается; пустой пароль при редактировании
    оставляет прежний, непустой - заменяет его.
    """
    password = CredentialField(label="Пароль")
    seat_name = RelatedNameField(Seat, url='filebook:seat-names', label="Seat")
    department_name = RelatedNameField(Department, url='filebook:department-names', label="Dept.")
    branch_name = RelatedNameField(Branch, url='filebook:branch-names', label="Branch")
    organization_name = RelatedNameField(Organization, url='filebook:organization-names', label="Org.")

    related_name_fields = {
        'seat_name': 'seat',
        'department_name': 'department',
        'branch_name': 'branch',
        'organization_name': 'organization',
    }
    keep_on_blank = ('password',)

    class Meta:
        model = User
        fields = ['name', 'phone', 'email', 'password', 'dob', 'gender', 'role']

    def clean_password(self):
        raw_password = self.cleaned_data.get('password')
        if not raw_password:
            return raw_password
        if self.instance.pk:
            logger.info("Password changed for filebook user #%s", self.instance.pk)
        return encode_password(raw_password)
