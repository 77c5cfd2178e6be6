from django.contrib.admin.apps import AdminConfig


class FileBookAdminConfig(AdminConfig):
    """
    👨‍💼 Админка с меню File Book вместо стандартного сайта Django.
    """
    default_site = 'config.admin_site.FileBookAdminSite'
