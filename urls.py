from django.contrib import admin
from django.urls import path, include, re_path
from django.conf import settings
from django.conf.urls.static import static
from django.shortcuts import redirect
from django.views.static import serve
from filebook.error_handlers import error_400, error_403, error_404, error_500
from filebook.views import ajax_view


urlpatterns = [
    # Главная страница - сразу в админку
    path('', lambda request: redirect('admin:index'), name='home'),

    # 📡 AJAX из форм админки (ВАЖНО: ПЕРЕД admin.site.urls!)
    re_path(r'^admin/ajax/?$', admin.site.admin_view(ajax_view), name='admin_ajax'),

    # 👨‍💼 Админка
    path('admin/', admin.site.urls),

    # 📚 URL приложения filebook (автодополнение)
    path('filebook/', include('filebook.urls')),
]

# 🖼️ Публичные каталоги /system, /javascripts, /stylesheets, /images
urlpatterns += [
    re_path(rf'^(?P<path>(?:{prefix})/.*)$', serve, {'document_root': settings.PUBLIC_ROOT})
    for prefix in settings.PUBLIC_PREFIXES
]

# 📎 Вложения входящих (/data/document/...), файл базы из того же каталога не отдаётся
# Используем django.views.static.serve, так как проект работает без внешнего веб-сервера для media.
def serve_attachment(request, path):
    return serve(request, path, document_root=settings.MEDIA_ROOT)


media_prefix = settings.MEDIA_URL.lstrip('/').rstrip('/')
if media_prefix:
    urlpatterns += [
        re_path(rf'^{media_prefix}/(?P<path>document/.*)$', serve_attachment, name='attachment'),
    ]

# Настройки для режима разработки
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

    if 'debug_toolbar' in settings.INSTALLED_APPS:
        import debug_toolbar

        urlpatterns.append(path('__debug__/', include(debug_toolbar.urls)))

# Обработчики ошибок
handler400 = error_400
handler403 = error_403
handler404 = error_404
handler500 = error_500
