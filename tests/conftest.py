# tests/conftest.py

import pytest

from filebook.models import Organization, Branch, Department, Seat, User, Inward, Sender


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Вложения пишутся во временный каталог, а не в data/."""
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def organization(db):
    return Organization.objects.create(name='Head Office', contact='0471-200100')


@pytest.fixture
def branch(db):
    return Branch.objects.create(name='City Branch')


@pytest.fixture
def department(db):
    return Department.objects.create(name='Finance', email='finance@example.org')


@pytest.fixture
def other_department(db):
    return Department.objects.create(name='Registry')


@pytest.fixture
def seat(department, branch, organization):
    return Seat.objects.create(
        name='Accountant',
        code='FIN-1',
        department=department,
        branch=branch,
        organization=organization,
    )


@pytest.fixture
def filebook_user(seat):
    return User.objects.create(
        name='Abraham',
        email='abraham@example.org',
        password='stored-secret',
        gender='Male',
        seat=seat,
        department=seat.department,
        branch=seat.branch,
        organization=seat.organization,
    )


@pytest.fixture
def make_inward(db):
    """Фабрика входящих с отправителем."""
    def make(title='Inward', inward_type='Letter', mode='By Hand', status='Received', sender_name=None):
        inward = Inward.objects.create(title=title, inward_type=inward_type, mode=mode, status=status)
        if sender_name:
            Sender.objects.create(inward=inward, name=sender_name, sender_type='Individual')
        return inward
    return make


@pytest.fixture
def inwards(make_inward):
    """Набор входящих для проверки scopes."""
    return [
        make_inward('Letter received', 'Letter', 'By Hand', 'Received', 'Alice'),
        make_inward('Letter processed', 'Letter', 'Email', 'Processed', 'Bob'),
        make_inward('Tender processed', 'Tender', 'Email', 'Processed', 'Carol'),
        make_inward('Application rejected', 'Application', 'Tele Call', 'Rejected'),
    ]
