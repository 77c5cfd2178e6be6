import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# 📌 Загрузка переменных окружения из файла .env
load_dotenv()

# 📂 Определяем корневой каталог проекта
BASE_DIR = Path(__file__).resolve().parent

# 🧪 Определяем, запущены ли тесты
TESTING = (len(sys.argv) > 1 and sys.argv[1] == 'test') or 'pytest' in sys.modules

# 🔐 Основные настройки безопасности
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-filebook-local-key')
# DEBUG всегда False здесь, для разработки используйте settings_dev
DEBUG = False
ALLOWED_HOSTS = os.getenv('DJANGO_ALLOWED_HOSTS', '127.0.0.1,localhost').split(',')

# 📚 Настройки File Book
FILEBOOK_SITE_NAME = os.getenv('FILEBOOK_SITE_NAME', 'File Book')
FILEBOOK_PORT = int(os.getenv('FILEBOOK_PORT', 8080))
# plain - пароль хранится как введён, sha1 - хранится hex-дайджест SHA-1
FILEBOOK_PASSWORD_HASH = os.getenv('FILEBOOK_PASSWORD_HASH', 'plain')

# 💾 Каталог данных (база и вложения)
DATA_DIR = Path(os.getenv('FILEBOOK_DATA_DIR', BASE_DIR / 'data'))
DATA_DIR.mkdir(parents=True, exist_ok=True)

# 🖼️ Каталог публичных файлов (/system, /javascripts, /stylesheets, /images)
PUBLIC_ROOT = BASE_DIR / 'public'
PUBLIC_PREFIXES = ['system', 'javascripts', 'stylesheets', 'images']


# 📱 Базовые приложения  ────────────────────────────────────────────────
DJANGO_APPS = [
    'dal',                     # Django Autocomplete Light 🔍 (до админки)
    'dal_select2',             # Виджеты Select2 для DAL 🎯
    'config.apps.FileBookAdminConfig',  # Админка File Book 👨‍💼
    'django.contrib.auth',       # Аутентификация 🔑
    'django.contrib.contenttypes', # Типы контента 📄
    'django.contrib.sessions',   # Сессии пользователя 🕑
    'django.contrib.messages',   # Сообщения 📨
    'django.contrib.staticfiles', # Статические файлы 🖼️
]

# 🔌 Сторонние приложения
THIRD_PARTY_APPS = [
    'import_export',          # Экспорт реестров
]

# 🏠 Локальные приложения
LOCAL_APPS = [
    'filebook.apps.FileBookConfig',  # Картотека входящих 📚
]

# Объединяем все приложения
INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# 🛠️ Базовый middleware
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',     # Защита 🔒
    'whitenoise.middleware.WhiteNoiseMiddleware',        # WhiteNoise для статики 🎨
    'django.contrib.sessions.middleware.SessionMiddleware', # Сессии 🕑
    'django.middleware.common.CommonMiddleware',         # Общие настройки 🔧
    'django.middleware.csrf.CsrfViewMiddleware',        # CSRF защита 🚫
    'django.contrib.auth.middleware.AuthenticationMiddleware', # Аутентификация 🔑
    'django.contrib.messages.middleware.MessageMiddleware', # Сообщения 📨
    'django.middleware.clickjacking.XFrameOptionsMiddleware', # Защита от clickjacking 🖱️
]

# 🌐 URL-конфигурация
ROOT_URLCONF = 'urls'

# 📄 Настройки шаблонов
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [
            BASE_DIR / 'templates',
        ],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'django.template.context_processors.media', # MEDIA_URL для ссылок на вложения
            ],
        },
    },
]

# 🌍 WSGI-приложение
WSGI_APPLICATION = 'wsgi.application'

# 💾 База данных
if os.getenv('DATABASE_URL'):
    # dj-database-url разбирает URL базы данных
    import dj_database_url
    db_config = dj_database_url.config()
    db_config['CONN_MAX_AGE'] = 600
    DATABASES = {'default': db_config}
elif os.getenv('DB_ENGINE'): # Альтернативный способ конфигурации через отдельные переменные
    DATABASES = {
        'default': {
            'ENGINE': os.getenv('DB_ENGINE'),
            'NAME': os.getenv('DB_NAME'),
            'USER': os.getenv('DB_USER'),
            'PASSWORD': os.getenv('DB_PASSWORD'),
            'HOST': os.getenv('DB_HOST'),
            'PORT': os.getenv('DB_PORT'),
        }
    }
else: # Локальный файл SQLite, как в исходной картотеке
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': DATA_DIR / os.getenv('FILEBOOK_DB_NAME', 'dbfb.db'),
        }
    }

# 🔒 Валидаторы паролей (для учётных записей администраторов)
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

# 🌍 Интернационализация
LANGUAGE_CODE = os.getenv('LANGUAGE_CODE', 'ru-ru')
TIME_ZONE = os.getenv('TIME_ZONE', 'Europe/Moscow')
USE_I18N = True
USE_TZ = True

# 📁 Статические файлы
STATIC_URL = os.getenv('STATIC_URL', '/static/')
STATIC_ROOT = BASE_DIR / 'staticfiles'

STATICFILES_FINDERS = [
    'django.contrib.staticfiles.finders.FileSystemFinder',
    'django.contrib.staticfiles.finders.AppDirectoriesFinder',
]

# 📸 Медиа файлы (вложения входящих)
MEDIA_URL = os.getenv('MEDIA_URL', '/data/')
MEDIA_ROOT = DATA_DIR

# 🔑 Тип первичного ключа
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# 🔐 Настройки аутентификации
LOGIN_URL = 'admin:login'
LOGIN_REDIRECT_URL = 'admin:index'
AUTH_USER_MODEL = 'auth.User' # Учётные записи администраторов - стандартные

# 🍪 Настройки сессий
SESSION_ENGINE = 'django.contrib.sessions.backends.db'
SESSION_COOKIE_AGE = int(os.getenv('SESSION_COOKIE_AGE', 60 * 60 * 24 * 7)) # По умолчанию неделя
SESSION_COOKIE_SECURE = os.getenv('SESSION_COOKIE_SECURE', 'False') == 'True'

# 🔒 CSRF настройки
CSRF_COOKIE_SECURE = os.getenv('CSRF_COOKIE_SECURE', 'False') == 'True'
CSRF_TRUSTED_ORIGINS = os.getenv(
    'CSRF_TRUSTED_ORIGINS', f'http://localhost:{FILEBOOK_PORT},http://127.0.0.1:{FILEBOOK_PORT}'
).split(',')

# 💬 Django Messages Framework
MESSAGE_STORAGE = 'django.contrib.messages.storage.session.SessionStorage'

# 📤 django-import-export
IMPORT_EXPORT_USE_TRANSACTIONS = True

# 🔒 Дополнительные настройки безопасности
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# 📝 Логирование
LOGS_DIR = BASE_DIR / 'logs'
LOGS_DIR.mkdir(exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{levelname}] {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '[{levelname}] {asctime} {module}: {message}',
            'style': '{',
        },
        'django.server': {
            '()': 'django.utils.log.ServerFormatter',
            'format': '[{server_time}] {message}',
            'style': '{',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
            'level': 'INFO',
        },
        'file': {
            'class': 'logging.FileHandler',
            'filename': LOGS_DIR / 'django.log',
            'formatter': 'verbose',
            'level': 'DEBUG',
            'encoding': 'utf-8',
        },
        'django.server': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'django.server',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.server': {
            'handlers': ['django.server'],
            'level': 'INFO',
            'propagate': False,
        },
        'filebook': { # Логгер приложения картотеки
            'handlers': ['file', 'console'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}
