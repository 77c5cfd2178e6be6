from .fields import RelatedNameField, CredentialField
from .mixins import RelatedNameFormMixin, KeepOnBlankMixin
from .user import UserForm
from .seat import SeatForm
from .inward import InwardForm

__all__ = [
    'RelatedNameField',
    'CredentialField',
    'RelatedNameFormMixin',
    'KeepOnBlankMixin',
    'UserForm',
    'SeatForm',
    'InwardForm',
]
