"""
Development settings
Используйте этот файл ТОЛЬКО для локальной разработки!

Установка: export DJANGO_SETTINGS_MODULE=settings_dev
"""
from settings import *

# ⚠️ DEBUG включён ТОЛЬКО для development!
DEBUG = True

# Разрешаем все хосты в development
ALLOWED_HOSTS = ['*']

# Django Debug Toolbar
if not TESTING:
    if 'debug_toolbar' not in INSTALLED_APPS:
        INSTALLED_APPS.append('debug_toolbar')

    if 'debug_toolbar.middleware.DebugToolbarMiddleware' not in MIDDLEWARE:
        MIDDLEWARE.insert(0, 'debug_toolbar.middleware.DebugToolbarMiddleware')

    INTERNAL_IPS = ['127.0.0.1', 'localhost']

# SQL-запросы в консоль, как LogMode(true) в старой картотеке
LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'DEBUG',
    'propagate': False,
}

print("🔧 DEVELOPMENT MODE: DEBUG=True")
print("⚠️  НЕ ИСПОЛЬЗУЙТЕ В PRODUCTION!")
