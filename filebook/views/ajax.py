import logging

from django.http import JsonResponse
from django.views.decorators.http import require_POST

logger = logging.getLogger(__name__)

AJAX_RESPONSE = {"Name": "Abraham"}


@require_POST
def ajax_view(request):
    """
    📡 Приём изменений из форм админки (res, id, field, value).

    Пока только логирует запрос и отвечает фиксированным JSON.
    """
    res = request.POST.get('res', '')
    record_id = request.POST.get('id', '')
    field = request.POST.get('field', '')
    value = request.POST.get('value', '')
    logger.info("Ajax request: res=%s id=%s field=%s value=%s", res, record_id, field, value)
    return JsonResponse(AJAX_RESPONSE, json_dumps_params={"separators": (",", ":")})
