import json

import pytest
from django.core.exceptions import PermissionDenied, SuspiciousOperation
from django.urls import reverse

from filebook.error_handlers import error_400, error_403, error_404, error_500

pytestmark = pytest.mark.django_db


class TestAjaxEndpoint:
    def test_post_returns_fixed_payload(self, admin_client):
        response = admin_client.post('/admin/ajax', {
            'res': 'inward', 'id': '7', 'field': 'status', 'value': 'Opened',
        })

        assert response.status_code == 200
        assert response['Content-Type'] == 'application/json'
        assert response.content == b'{"Name":"Abraham"}'

    @pytest.mark.parametrize('body', [{}, {'res': 'user'}, {'unexpected': 'x' * 500}])
    def test_any_post_body_gets_same_answer(self, admin_client, body):
        response = admin_client.post('/admin/ajax', body)

        assert response.status_code == 200
        assert json.loads(response.content) == {'Name': 'Abraham'}

    def test_trailing_slash_is_accepted(self, admin_client):
        assert admin_client.post('/admin/ajax/', {}).status_code == 200

    def test_get_is_not_allowed(self, admin_client):
        assert admin_client.get('/admin/ajax').status_code == 405

    def test_anonymous_is_sent_to_login(self, client):
        response = client.post('/admin/ajax', {'res': 'inward'})

        assert response.status_code == 302
        assert reverse('admin:login') in response['Location']


class TestStaticServing:
    def test_public_javascript_is_served(self, client):
        response = client.get('/javascripts/file_book.js')

        assert response.status_code == 200
        assert b'/admin/ajax' in b''.join(response.streaming_content)

    def test_database_file_is_not_served(self, client):
        assert client.get('/data/dbfb.db').status_code == 404

    def test_uploaded_attachment_is_served(self, client, media_root):
        target = media_root / 'document' / '1' / 'attachment'
        target.mkdir(parents=True)
        (target / 'scan.abc.txt').write_bytes(b'scan')

        response = client.get('/data/document/1/attachment/scan.abc.txt')

        assert response.status_code == 200
        assert b''.join(response.streaming_content) == b'scan'

    def test_root_redirects_to_admin(self, client):
        response = client.get('/')

        assert response.status_code == 302
        assert response['Location'] == reverse('admin:index')


class TestRelatedNamesAutocomplete:
    def test_staff_gets_matching_names(self, admin_client, department, other_department):
        response = admin_client.get(reverse('filebook:department-names'), {'q': 'fin'})

        assert response.status_code == 200
        texts = [item['text'] for item in json.loads(response.content)['results']]
        assert texts == ['Finance']

    def test_soft_deleted_names_are_not_offered(self, admin_client, department, other_department):
        other_department.delete()

        response = admin_client.get(reverse('filebook:department-names'))

        texts = [item['text'] for item in json.loads(response.content)['results']]
        assert texts == ['Finance']

    def test_anonymous_gets_nothing(self, client, department):
        response = client.get(reverse('filebook:department-names'))

        assert json.loads(response.content)['results'] == []


class TestErrorHandlers:
    def test_unknown_page_renders_html_with_admin_link(self, client):
        response = client.get('/no-such-page/')

        assert response.status_code == 404
        content = response.content.decode()
        assert 'Страница не найдена' in content
        assert f'href="{reverse("admin:index")}"' in content

    def test_unknown_autocomplete_answers_json(self, admin_client):
        response = admin_client.get('/filebook/autocomplete/nothing-names/')

        assert response.status_code == 404
        assert json.loads(response.content) == {'error': 'Страница не найдена', 'status': 404}

    @pytest.mark.parametrize('handler, exception, status, message', [
        (error_400, SuspiciousOperation('bad'), 400, 'Некорректный запрос'),
        (error_403, PermissionDenied(), 403, 'Доступ запрещен'),
        (error_404, None, 404, 'Страница не найдена'),
    ])
    def test_html_pages(self, rf, handler, exception, status, message):
        response = handler(rf.get('/admin/filebook/inward/'), exception)

        assert response.status_code == status
        assert message in response.content.decode()
        assert response['Content-Type'].startswith('text/html')

    @pytest.mark.parametrize('handler, exception, status', [
        (error_400, SuspiciousOperation('bad'), 400),
        (error_403, PermissionDenied(), 403),
    ])
    def test_ajax_errors_are_json(self, rf, handler, exception, status):
        response = handler(rf.post('/admin/ajax'), exception)

        assert response.status_code == status
        assert json.loads(response.content)['status'] == status

    def test_server_error_page(self, rf):
        response = error_500(rf.get('/admin/'))

        assert response.status_code == 500
        assert 'Внутренняя ошибка сервера' in response.content.decode()

    def test_server_error_on_ajax_is_json(self, rf):
        response = error_500(rf.post('/admin/ajax'))

        assert response.status_code == 500
        assert json.loads(response.content) == {'error': 'Внутренняя ошибка сервера', 'status': 500}
