"""
🔎 Именованные фильтры ("scopes") по перечислимым полям.

Каждый scope - чистая функция (queryset, request) -> queryset, которая
замыкает только своё поле и своё значение. Несколько scopes применяются
последовательно, то есть пересекаются (логическое И).
"""
from collections import OrderedDict, namedtuple
from functools import reduce

from filebook.constants import INWARD_TYPES, INWARD_MODES, INWARD_STATUSES, GENDERS

Scope = namedtuple('Scope', ['name', 'group', 'field', 'handler'])


def make_scope(field_name, value):
    """Обработчик, оставляющий записи с field_name == value."""
    def handler(queryset, request=None):
        return queryset.filter(**{field_name: value})
    return handler


def build_scopes(groups):
    """
    Строит scopes по описанию групп.

    groups: {заголовок группы: (имя поля, список значений)}
    Возвращает OrderedDict {заголовок группы: [Scope, ...]}.
    """
    result = OrderedDict()
    for group, (field_name, values) in groups.items():
        result[group] = [
            Scope(name=value, group=group, field=field_name, handler=make_scope(field_name, value))
            for value in values
        ]
    return result


def find_scope(scopes, group, name):
    """Scope группы по имени или None."""
    for scope in scopes.get(group, []):
        if scope.name == name:
            return scope
    return None


def apply_scopes(queryset, active_scopes, request=None):
    """Применяет все активные scopes по очереди (пересечение)."""
    return reduce(lambda qs, scope: scope.handler(qs, request), active_scopes, queryset)


INWARD_SCOPES = build_scopes(OrderedDict([
    ("Type", ("inward_type", INWARD_TYPES)),
    ("Mode", ("mode", INWARD_MODES)),
    ("Status", ("status", INWARD_STATUSES)),
]))

USER_SCOPES = build_scopes(OrderedDict([
    ("Gender", ("gender", GENDERS)),
]))
