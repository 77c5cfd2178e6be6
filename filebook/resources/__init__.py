from .inward import InwardResource
from .user import UserResource

__all__ = [
    'InwardResource',
    'UserResource',
]
