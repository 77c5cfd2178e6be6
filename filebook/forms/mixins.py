"""
🔀 Миксины для форм

1. 🔗 RelatedNameFormMixin - внешние ключи по имени связанной записи
2. 🧷 KeepOnBlankMixin - пустое значение поля не затирает сохранённое
"""
import logging

logger = logging.getLogger(__name__)


class RelatedNameFormMixin:
    """
    🔗 Внешние ключи, которые редактируются по имени.

    related_name_fields = {'department_name': 'department', ...}
    Ключ - поле формы (RelatedNameField), значение - атрибут модели.

    - при открытии формы поле заполняется именем связанной записи;
    - при сохранении имя ищется в связанной таблице; найдено - внешний
      ключ переназначается, не найдено или пусто - остаётся как был.
    """
    related_name_fields = {}

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field_name, attr in self.related_name_fields.items():
            if field_name not in self.fields:
                continue
            related = getattr(self.instance, attr, None)
            if related is not None and not related.is_deleted:
                self.initial.setdefault(field_name, related.name)

    def apply_related_names(self, instance):
        for field_name, attr in self.related_name_fields.items():
            if field_name not in self.fields:
                continue
            value = self.cleaned_data.get(field_name)
            if not value:
                continue
            related = self.fields[field_name].resolve(value)
            if related is None:
                logger.info(
                    "%s.%s: no %s named %r, keeping current value",
                    instance._meta.object_name, attr,
                    self.fields[field_name].related_model._meta.object_name, value
                )
                continue
            setattr(instance, attr, related)

    def save(self, commit=True):
        instance = super().save(commit=False)
        self.apply_related_names(instance)
        if commit:
            instance.save()
            self._save_m2m()
        return instance


class KeepOnBlankMixin:
    """
    🧷 Для полей из keep_on_blank пустое значение при редактировании
    оставляет то, что уже сохранено в записи.
    """
    keep_on_blank = ()

    def clean(self):
        cleaned_data = super().clean()
        if self.instance.pk:
            for field_name in self.keep_on_blank:
                if field_name in cleaned_data and cleaned_data[field_name] in ('', None):
                    cleaned_data[field_name] = getattr(self.instance, field_name)
        return cleaned_data
