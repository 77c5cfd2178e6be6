from dal import autocomplete

from filebook.forms.fields import related_name_choices


class RelatedNamesAutocomplete(autocomplete.Select2ListView):
    """
    🔍 Список имён записей модели для полей RelatedNameField.
    Модель задаётся в as_view(model=...).
    """
    model = None

    def get_list(self):
        # Если пользователь не сотрудник, возвращаем пустой список
        if not self.request.user.is_authenticated or not self.request.user.is_staff:
            return []
        return [name for name, _ in related_name_choices(self.model) if name]
