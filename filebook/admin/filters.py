"""
🔎 Фильтры списка админки, построенные из scopes.

Одна группа scopes - один SimpleListFilter. Фильтры разных групп
Django применяет последовательно, поэтому они пересекаются.
"""
from django.contrib import admin

from filebook.scopes import find_scope


def scope_filter(scopes, group):
    group_scopes = scopes[group]
    first = group_scopes[0]
    field_name = first.field

    class ScopeFilter(admin.SimpleListFilter):
        title = first.group
        parameter_name = f"scope_{field_name}"

        def lookups(self, request, model_admin):
            return [(scope.name, scope.name) for scope in group_scopes]

        def queryset(self, request, queryset):
            scope = find_scope(scopes, first.group, self.value())
            if scope is None:
                return queryset
            return scope.handler(queryset, request)

    ScopeFilter.__name__ = f"{first.group}ScopeFilter"
    ScopeFilter.__qualname__ = ScopeFilter.__name__
    return ScopeFilter


def scope_filters(scopes):
    """Фильтры для всех групп в порядке их объявления."""
    return [scope_filter(scopes, group) for group in scopes]
