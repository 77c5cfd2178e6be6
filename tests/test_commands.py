from io import StringIO
from unittest import mock

import pytest
from django.core.management import call_command

from filebook.models import Organization, Department, Seat, User, Inward

pytestmark = pytest.mark.django_db


def test_create_test_data_is_idempotent():
    call_command('create_test_data', stdout=StringIO())
    call_command('create_test_data', stdout=StringIO())

    assert Organization.objects.count() == 1
    assert Department.objects.count() == 2
    assert Seat.objects.count() == 4
    assert User.objects.count() == 1
    assert Inward.objects.count() == 4
    assert set(Inward.objects.values_list('status', flat=True)) == {'Received', 'Opened', 'Processed', 'Rejected'}


def test_create_test_data_user_has_related_rows():
    call_command('create_test_data', inwards=1, stdout=StringIO())

    user = User.objects.get()
    assert user.seat.name == 'Clerk'
    assert user.department.name == 'Registry'
    assert user.addresses.count() == 1
    assert Inward.objects.get().sender.name == 'Sender 1'


class TestRunFileBook:
    target = 'filebook.management.commands.runfilebook.call_command'
    logger = 'filebook.management.commands.runfilebook.logger'

    def test_migrates_then_serves_on_configured_port(self, settings):
        settings.FILEBOOK_PORT = 9090
        with mock.patch(self.target) as fake_call, mock.patch(self.logger) as fake_logger:
            call_command('runfilebook')

        assert fake_call.call_args_list == [
            mock.call('migrate', interactive=False, verbosity=0),
            mock.call('runserver', '0.0.0.0:9090', use_reloader=False),
        ]
        assert fake_logger.info.call_args_list == [
            mock.call('FileBook Started!'),
            mock.call('Listening on: http://localhost:%s', '9090'),
        ]

    def test_explicit_address_and_skip_migrate(self):
        with mock.patch(self.target) as fake_call:
            call_command('runfilebook', '127.0.0.1:8000', skip_migrate=True)

        fake_call.assert_called_once_with('runserver', '127.0.0.1:8000', use_reloader=False)
