# filebook/models/__init__.py
from .base import TimeStampedModel, soft_deleted
from .organization import Organization
from .branch import Branch
from .department import Department
from .seat import Seat
from .user import User
from .address import Address
from .inward import Inward
from .sender import Sender
from .document import Document

__all__ = [
    'TimeStampedModel',
    'soft_deleted',
    'Organization',
    'Branch',
    'Department',
    'Seat',
    'User',
    'Address',
    'Inward',
    'Sender',
    'Document',
]
