"""
🚧 Страницы ошибок картотеки.

Запросы из скриптов админки (/admin/ajax, автодополнение имён) получают
ошибку в JSON, остальные - HTML-страницу со ссылкой обратно в админку.
"""
import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.urls import reverse

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    400: 'Некорректный запрос',
    403: 'Доступ запрещен',
    404: 'Страница не найдена',
    500: 'Внутренняя ошибка сервера',
}

JSON_PATH_PREFIXES = ('/admin/ajax', '/filebook/autocomplete/')


def wants_json(request):
    return request.path.startswith(JSON_PATH_PREFIXES)


def error_response(request, status):
    message = ERROR_MESSAGES[status]
    if wants_json(request):
        return JsonResponse({'error': message, 'status': status}, status=status)
    context = {
        'error_code': status,
        'error_message': message,
        'admin_url': reverse('admin:index'),
    }
    return render(request, f'errors/{status}.html', context, status=status)


def error_400(request, exception):
    logger.warning("Bad request %s: %s", request.path, exception)
    return error_response(request, 400)


def error_403(request, exception):
    logger.warning("Forbidden %s for %s", request.path, getattr(request, 'user', None))
    return error_response(request, 403)


def error_404(request, exception):
    logger.info("Not found: %s", request.path)
    return error_response(request, 404)


def error_500(request):
    # Подробности исключения уже записал django.request
    logger.error("Server error on %s", request.path)
    return error_response(request, 500)
