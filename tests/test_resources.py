import pytest

from filebook.models import Document
from filebook.resources import InwardResource, UserResource

pytestmark = pytest.mark.django_db


def test_inward_export_flattens_sender_and_documents(make_inward):
    inward = make_inward('Invitation to meeting', 'Invitation', 'Email', 'Opened', 'Collector')
    Document.objects.create(inward=inward, name='agenda')
    Document.objects.create(inward=inward, name='minutes')
    make_inward('No sender')

    dataset = InwardResource().export()

    assert dataset.headers == [
        'id', 'title', 'inward_type', 'mode', 'received_date', 'status', 'remarks',
        'sender_name', 'sender_type', 'documents_count',
    ]
    rows = {row['title']: row for row in dataset.dict}
    assert rows['Invitation to meeting']['sender_name'] == 'Collector'
    assert rows['Invitation to meeting']['documents_count'] == 2
    assert rows['No sender']['sender_name'] == ''


def test_user_export_uses_names_and_omits_password(filebook_user):
    dataset = UserResource().export()

    assert 'password' not in dataset.headers
    row = dataset.dict[0]
    assert row['seat'] == 'Accountant'
    assert row['department'] == 'Finance'
    assert row['branch'] == 'City Branch'
    assert row['organization'] == 'Head Office'


def test_user_export_blanks_soft_deleted_relations(filebook_user):
    filebook_user.department.delete()
    filebook_user.refresh_from_db()

    row = UserResource().export().dict[0]

    assert row['department'] == ''
    assert row['seat'] == 'Accountant'
