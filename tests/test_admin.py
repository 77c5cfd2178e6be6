import hashlib

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

from filebook.models import Inward, Sender, User, Organization, Branch, Department, Seat

pytestmark = pytest.mark.django_db


def inline_management(prefix, total=0, initial=0, max_num=1000):
    return {
        f'{prefix}-TOTAL_FORMS': str(total),
        f'{prefix}-INITIAL_FORMS': str(initial),
        f'{prefix}-MIN_NUM_FORMS': '0',
        f'{prefix}-MAX_NUM_FORMS': str(max_num),
    }


def user_post_data(**overrides):
    data = {
        'name': 'Abraham',
        'phone': '0471-111111',
        'email': 'abraham@example.org',
        'password': '',
        'dob': '1990-05-17',
        'gender': 'Male',
        'role': 'Inward User',
        'seat_name': '',
        'department_name': '',
        'branch_name': '',
        'organization_name': '',
        **inline_management('addresses'),
    }
    data.update(overrides)
    return data


class TestAdminSite:
    def test_index_groups_menu_and_hides_invisible_resources(self, admin_client):
        response = admin_client.get(reverse('admin:index'))

        assert response.status_code == 200
        sections = {str(section['name']): [m['object_name'] for m in section['models']]
                    for section in response.context['app_list']}
        assert sections['📥 File Management'] == ['Inward']
        assert sections['🏢 Administration'] == ['User', 'Department', 'Organization', 'Branch']
        all_models = [name for models in sections.values() for name in models]
        assert 'Sender' not in all_models
        assert 'Seat' not in all_models

    def test_site_header_comes_from_settings(self, admin_client):
        response = admin_client.get(reverse('admin:index'))

        assert response.context['site_header'] == 'File Book'

    @pytest.mark.parametrize('name', [
        'filebook_inward', 'filebook_user', 'filebook_department', 'filebook_seat',
        'filebook_organization', 'filebook_branch', 'filebook_sender',
    ])
    def test_changelists_render(self, admin_client, name):
        response = admin_client.get(reverse(f'admin:{name}_changelist'))

        assert response.status_code == 200


class TestInwardAdmin:
    def test_create_through_admin_and_read_back(self, admin_client):
        data = {
            'title': 'Tender for stationery',
            'inward_type': 'Tender',
            'mode': 'Email',
            'received_date': '2024-03-01',
            'remarks': 'Urgent',
            'status': 'Opened',
            **inline_management('sender', total=1, max_num=1),
            'sender-0-sender_type': 'Organization',
            'sender-0-name': 'Public Works',
            'sender-0-email': 'pwd@example.org',
            'sender-0-phone': '',
            'sender-0-address': 'Secretariat',
            **inline_management('documents'),
        }

        response = admin_client.post(reverse('admin:filebook_inward_add'), data)

        assert response.status_code == 302, response.context['adminform'].form.errors
        inward = Inward.objects.get(title='Tender for stationery')
        assert (inward.inward_type, inward.mode, inward.status, inward.remarks) == ('Tender', 'Email', 'Opened', 'Urgent')
        assert str(inward.received_date) == '2024-03-01'
        assert inward.sender.name == 'Public Works'
        assert inward.sender.sender_type == 'Organization'

    def test_attachment_uploaded_through_inline(self, admin_client, media_root):
        content = b'%PDF-1.4 scanned letter'
        data = {
            'title': 'Letter with scan',
            'inward_type': 'Letter',
            'mode': 'By Hand',
            'received_date': '2024-03-02',
            'remarks': '',
            'status': 'Received',
            **inline_management('sender', max_num=1),
            **inline_management('documents', total=1),
            'documents-0-name': 'Scan',
            'documents-0-attachment': SimpleUploadedFile('Scan.PDF', content, content_type='application/pdf'),
        }

        response = admin_client.post(reverse('admin:filebook_inward_add'), data)

        assert response.status_code == 302, response.context['adminform'].form.errors
        inward = Inward.objects.get(title='Letter with scan')
        document = inward.documents.get()
        digest = hashlib.md5(content).hexdigest()[:12]
        assert document.name == 'Scan'
        assert document.attachment.name == f'document/{inward.pk}/attachment/Scan.{digest}.pdf'
        assert (media_root / document.attachment.name).read_bytes() == content

    def test_edit_form_has_no_status(self, admin_client, make_inward):
        inward = make_inward('Letter', sender_name='Alice')

        response = admin_client.get(reverse('admin:filebook_inward_change', args=[inward.pk]))

        assert response.status_code == 200
        assert 'status' not in response.context['adminform'].form.fields
        assert 'remarks' in response.context['adminform'].form.fields

    def test_changelist_scopes_intersect(self, admin_client, inwards):
        response = admin_client.get(
            reverse('admin:filebook_inward_changelist'),
            {'scope_inward_type': 'Letter', 'scope_status': 'Processed'},
        )

        assert response.status_code == 200
        result = response.context['cl'].queryset
        assert list(result.values_list('title', flat=True)) == ['Letter processed']

    def test_changelist_single_scope(self, admin_client, inwards):
        response = admin_client.get(reverse('admin:filebook_inward_changelist'), {'scope_status': 'Processed'})

        titles = sorted(response.context['cl'].queryset.values_list('title', flat=True))
        assert titles == ['Letter processed', 'Tender processed']

    def test_search_by_sender_name_and_id(self, admin_client, inwards):
        url = reverse('admin:filebook_inward_changelist')

        by_sender = admin_client.get(url, {'q': 'Carol'}).context['cl'].queryset
        by_id = admin_client.get(url, {'q': str(inwards[3].pk)}).context['cl'].queryset

        assert [i.title for i in by_sender] == ['Tender processed']
        assert inwards[3] in list(by_id)

    def test_status_action(self, admin_client, inwards):
        response = admin_client.post(reverse('admin:filebook_inward_changelist'), {
            'action': 'mark_processed',
            '_selected_action': [inwards[0].pk, inwards[3].pk],
        })

        assert response.status_code == 302
        assert Inward.objects.filter(status='Processed').count() == 4

    def test_delete_is_soft_and_cascades(self, admin_client, make_inward):
        inward = make_inward('To be removed', sender_name='Dave')

        response = admin_client.post(
            reverse('admin:filebook_inward_delete', args=[inward.pk]), {'post': 'yes'}
        )

        assert response.status_code == 302
        assert not Inward.objects.filter(pk=inward.pk).exists()
        assert Inward.all_objects.filter(pk=inward.pk).exists()
        assert not Sender.objects.filter(inward_id=inward.pk).exists()


class TestUserAdmin:
    def test_create_and_edit_keep_password(self, admin_client, seat):
        add_url = reverse('admin:filebook_user_add')
        response = admin_client.post(add_url, user_post_data(password='first', seat_name='Accountant'))
        assert response.status_code == 302

        user = User.objects.get(name='Abraham')
        assert user.password == 'first'
        assert user.seat == seat
        assert str(user.dob) == '1990-05-17'

        change_url = reverse('admin:filebook_user_change', args=[user.pk])
        response = admin_client.post(change_url, user_post_data(phone='0471-222222', seat_name='Accountant'))
        assert response.status_code == 302

        user.refresh_from_db()
        assert user.phone == '0471-222222'
        assert user.password == 'first'

        response = admin_client.post(change_url, user_post_data(password='second', seat_name='Accountant'))
        assert response.status_code == 302
        user.refresh_from_db()
        assert user.password == 'second'

    def test_unknown_related_name_does_not_fail_the_form(self, admin_client, filebook_user):
        change_url = reverse('admin:filebook_user_change', args=[filebook_user.pk])

        response = admin_client.post(change_url, user_post_data(department_name='Nowhere'))

        assert response.status_code == 302
        filebook_user.refresh_from_db()
        assert filebook_user.department.name == 'Finance'

    def test_changelist_shows_names_and_hides_password(self, admin_client, filebook_user):
        response = admin_client.get(reverse('admin:filebook_user_changelist'))

        content = response.content.decode()
        assert 'Accountant' in content
        assert 'City Branch' in content
        assert 'Head Office' in content
        assert 'stored-secret' not in content

    def test_change_form_does_not_render_password(self, admin_client, filebook_user):
        response = admin_client.get(reverse('admin:filebook_user_change', args=[filebook_user.pk]))

        assert response.status_code == 200
        assert 'stored-secret' not in response.content.decode()

    def test_gender_scope(self, admin_client, filebook_user):
        User.objects.create(name='Mary', gender='Female')

        response = admin_client.get(reverse('admin:filebook_user_changelist'), {'scope_gender': 'Female'})

        assert [u.name for u in response.context['cl'].queryset] == ['Mary']

    def test_search_by_pincode(self, admin_client, filebook_user):
        filebook_user.addresses.create(address='Quarters 12', pincode='695001')

        response = admin_client.get(reverse('admin:filebook_user_changelist'), {'q': '695001'})

        assert [u.name for u in response.context['cl'].queryset] == ['Abraham']

    def test_search_skips_deleted_addresses(self, admin_client, filebook_user):
        User.objects.create(name='Mary')
        old = filebook_user.addresses.create(address='Old Quarters', pincode='111111')
        filebook_user.addresses.create(address='New Quarters', pincode='222222')
        old.delete()
        url = reverse('admin:filebook_user_changelist')

        by_old_pin = admin_client.get(url, {'q': '111111'}).context['cl'].queryset
        by_address = admin_client.get(url, {'q': 'quarters'}).context['cl'].queryset

        assert list(by_old_pin) == []
        assert [u.name for u in by_address] == ['Abraham']


class TestSenderAdmin:
    def test_senders_cannot_be_added_or_deleted_directly(self, admin_client, make_inward):
        inward = make_inward('Letter', sender_name='Alice')

        assert admin_client.get(reverse('admin:filebook_sender_add')).status_code == 403
        response = admin_client.post(reverse('admin:filebook_sender_delete', args=[inward.sender.pk]), {'post': 'yes'})
        assert response.status_code == 403
        assert Sender.objects.filter(pk=inward.sender.pk).exists()


class TestStructureAdmin:
    def test_organization_round_trip(self, admin_client):
        response = admin_client.post(reverse('admin:filebook_organization_add'), {
            'name': 'Public Works',
            'address': 'Secretariat',
            'contact': '0471-300300',
            'website': 'pwd.example.org',
            'pr_contact': 'Press Office',
        })

        assert response.status_code == 302
        org = Organization.objects.get(name='Public Works')
        assert (org.address, org.contact, org.website, org.pr_contact) == (
            'Secretariat', '0471-300300', 'pwd.example.org', 'Press Office'
        )

    def test_branch_round_trip(self, admin_client):
        response = admin_client.post(reverse('admin:filebook_branch_add'), {
            'name': 'Harbour Branch',
            'address': 'Port Road 3',
            'contact': '0471-400400',
            'website': '',
        })

        assert response.status_code == 302
        branch = Branch.objects.get(name='Harbour Branch')
        assert (branch.address, branch.contact) == ('Port Road 3', '0471-400400')

    def test_department_with_seat_inline(self, admin_client, organization, branch):
        response = admin_client.post(reverse('admin:filebook_department_add'), {
            'name': 'Stores',
            'email': 'stores@example.org',
            'phone': '0471-500500',
            'address': 'Block C',
            **inline_management('seats', total=1),
            'seats-0-name': 'Storekeeper',
            'seats-0-code': 'STO-1',
            'seats-0-organization': str(organization.pk),
            'seats-0-branch': str(branch.pk),
        })

        assert response.status_code == 302, response.context['adminform'].form.errors
        department = Department.objects.get(name='Stores')
        assert department.email == 'stores@example.org'
        seat = department.seats.get()
        assert (seat.name, seat.code) == ('Storekeeper', 'STO-1')
        assert (seat.organization, seat.branch) == (organization, branch)

    def test_seat_resolves_relations_by_name(self, admin_client, organization, branch, department):
        response = admin_client.post(reverse('admin:filebook_seat_add'), {
            'name': 'Cashier',
            'code': 'FIN-2',
            'organization_name': 'Head Office',
            'branch_name': 'City Branch',
            'department_name': 'Finance',
        })

        assert response.status_code == 302, response.context['adminform'].form.errors
        seat = Seat.objects.get(name='Cashier')
        assert seat.code == 'FIN-2'
        assert (seat.organization, seat.branch, seat.department) == (organization, branch, department)

    def test_seat_change_form_shows_names(self, admin_client, seat):
        response = admin_client.get(reverse('admin:filebook_seat_change', args=[seat.pk]))

        form = response.context['adminform'].form
        assert form.initial['department_name'] == 'Finance'
        assert form.initial['organization_name'] == 'Head Office'
