# config/admin_site.py

from collections import OrderedDict
from django.conf import settings
from django.contrib.admin import AdminSite
from django.utils.translation import gettext_lazy as _


class FileBookAdminSite(AdminSite):
    index_title = "Панель управления"

    # Ключи вида "app_label.ObjectName": у auth и filebook есть свой User
    MENU_ORDER = OrderedDict([
        (_("📥 File Management"), [
            "filebook.Inward",
        ]),
        (_("🏢 Administration"), [
            "filebook.User", "filebook.Department", "filebook.Organization", "filebook.Branch",
        ]),
    ])

    # Зарегистрированы, но в меню не показываются (открываются из форм)
    HIDDEN_MODELS = ["filebook.Sender", "filebook.Seat"]

    def __init__(self, name='admin'):
        super().__init__(name)
        self.site_header = settings.FILEBOOK_SITE_NAME
        self.site_title = settings.FILEBOOK_SITE_NAME

    def get_app_list(self, request, app_label=None):
        """
        Возвращает меню, сгруппированное по логическим блокам.
        """
        app_list = super().get_app_list(request, app_label)

        # Плоский список всех моделей с ключом app_label.ObjectName
        all_models = []
        for app in app_list:
            for m in app['models']:
                key = f"{app['app_label']}.{m['object_name']}"
                if key not in self.HIDDEN_MODELS:
                    all_models.append((key, m))

        # Распределение по группам
        grouped_apps = OrderedDict()
        for index, (section, models) in enumerate(self.MENU_ORDER.items()):
            grouped_apps[section] = {'name': section, 'app_label': f'section{index}', 'models': []}
            for model in models:
                for key, m in all_models:
                    if key == model:
                        grouped_apps[section]['models'].append(m)

        # Прочее (учётные записи администраторов и т.п.)
        grouped_apps["📦 Прочее"] = {'name': "📦 Прочее", 'app_label': 'other', 'models': []}
        for key, m in all_models:
            if not any(key in models for models in self.MENU_ORDER.values()):
                grouped_apps["📦 Прочее"]['models'].append(m)

        return [section for section in grouped_apps.values() if section['models']]
