"""
🧩 Общие части админ-классов картотеки.
"""


def related_name_column(attr, label):
    """
    Колонка списка с именем связанной записи вместо её id.
    Пусто, если связи нет или связанная запись удалена.
    """
    def column(self, obj):
        related = getattr(obj, attr)
        if related is None or related.is_deleted:
            return ''
        return related.name

    column.short_description = label
    column.admin_order_field = f'{attr}__name'
    return column


class PrimaryKeySearchMixin:
    """
    🔢 Поиск по id: числовой запрос дополнительно ищет запись с таким pk.
    """

    def get_search_results(self, request, queryset, search_term):
        results, may_have_duplicates = super().get_search_results(request, queryset, search_term)
        term = search_term.strip()
        if term.isdigit():
            results |= queryset.filter(pk=int(term))
        return results, may_have_duplicates


class FileBookMediaMixin:
    """
    📜 Подключает скрипт картотеки (/javascripts/file_book.js) к формам.
    """

    class Media:
        js = ('/javascripts/file_book.js',)
