from .ajax import ajax_view

__all__ = [
    'ajax_view',
]
