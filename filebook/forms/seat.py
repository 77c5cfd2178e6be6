from django import forms

from filebook.models import Seat, Department, Branch, Organization
from .fields import RelatedNameField
from .mixins import RelatedNameFormMixin


class SeatForm(RelatedNameFormMixin, forms.ModelForm):
    """
    💺 Форма места: организация, филиал и отдел выбираются по имени.
    """
    organization_name = RelatedNameField(Organization, url='filebook:organization-names', label="Organization")
    branch_name = RelatedNameField(Branch, url='filebook:branch-names', label="Branch")
    department_name = RelatedNameField(Department, url='filebook:department-names', label="Department")

    related_name_fields = {
        'organization_name': 'organization',
        'branch_name': 'branch',
        'department_name': 'department',
    }

    class Meta:
        model = Seat
        fields = ['name', 'code']
