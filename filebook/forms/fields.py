"""
🧩 Поля форм картотеки.

RelatedNameField - внешний ключ, который показывается и вводится по имени
связанной записи. Неизвестное или пустое имя не считается ошибкой: форма
просто не трогает внешний ключ.

CredentialField - поле пароля, которое никогда не показывает сохранённое значение.
"""
from dal import autocomplete
from django import forms

EMPTY_CHOICE = ('', '---------')


def related_name_choices(model):
    names = (
        model.objects.exclude(name='')
        .order_by('name')
        .values_list('name', flat=True)
        .distinct()
    )
    return [EMPTY_CHOICE] + [(name, name) for name in names]


class RelatedNameField(forms.ChoiceField):
    def __init__(self, model, url=None, **kwargs):
        self.related_model = model
        kwargs.setdefault('required', False)
        if url and 'widget' not in kwargs:
            kwargs['widget'] = autocomplete.ListSelect2(url=url)

        def choices():
            return related_name_choices(model)

        super().__init__(choices=choices, **kwargs)

    def validate(self, value):
        # Имя вне списка допустимо, разрешение идёт в resolve()
        forms.Field.validate(self, value)

    def resolve(self, value):
        """Первая запись с таким именем или None."""
        if not value:
            return None
        return self.related_model.objects.filter(name=value).order_by('pk').first()


class CredentialField(forms.CharField):
    widget = forms.PasswordInput(render_value=False)

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('strip', False)
        super().__init__(**kwargs)
