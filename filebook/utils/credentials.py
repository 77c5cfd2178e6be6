"""
🔑 Хранение паролей пользователей картотеки.

Политика задаётся настройкой FILEBOOK_PASSWORD_HASH:
- plain - значение сохраняется ровно таким, каким его ввели;
- sha1  - сохраняется hex-дайджест SHA-1 (нижний регистр).
"""
import hashlib

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

PASSWORD_POLICIES = ('plain', 'sha1')


def encode_password(raw_password):
    policy = getattr(settings, 'FILEBOOK_PASSWORD_HASH', 'plain')
    if policy == 'plain':
        return raw_password
    if policy == 'sha1':
        return hashlib.sha1(raw_password.encode('utf-8')).hexdigest()
    raise ImproperlyConfigured(
        f"FILEBOOK_PASSWORD_HASH={policy!r}, допустимо: {', '.join(PASSWORD_POLICIES)}"
    )
