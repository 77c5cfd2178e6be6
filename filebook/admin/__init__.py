from django.contrib import admin  # noqa: F401
# Импорт админ-классов (они регистрируются через декораторы @admin.register)
from .branch import BranchAdmin
from .department import DepartmentAdmin
from .inward import InwardAdmin
from .organization import OrganizationAdmin
from .seat import SeatAdmin
from .sender import SenderAdmin
from .user import UserAdmin

__all__ = [
    'BranchAdmin',
    'DepartmentAdmin',
    'InwardAdmin',
    'OrganizationAdmin',
    'SeatAdmin',
    'SenderAdmin',
    'UserAdmin',
]
