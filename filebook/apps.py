from django.apps import AppConfig


class FileBookConfig(AppConfig):
    """
    📚 Конфигурация приложения "filebook" (Картотека входящих).
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'filebook'
    verbose_name = 'File Book'

    def ready(self):
        """
        Импортируем signals при инициализации приложения.
        """
        import filebook.signals  # noqa: F401
