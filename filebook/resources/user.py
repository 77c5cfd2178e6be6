"""
👤 Resource для экспорта пользователей картотеки
"""
from import_export import resources, fields

from filebook.models import User


def _name_or_blank(related):
    if related is None or related.is_deleted:
        return ''
    return related.name


class UserResource(resources.ModelResource):
    """
    📊 Пользователи без пароля; место и подразделения - по имени.
    """
    seat = fields.Field(column_name='seat', readonly=True)
    department = fields.Field(column_name='department', readonly=True)
    branch = fields.Field(column_name='branch', readonly=True)
    organization = fields.Field(column_name='organization', readonly=True)

    class Meta:
        model = User
        fields = (
            'id', 'name', 'phone', 'email', 'dob', 'gender', 'role',
            'seat', 'department', 'branch', 'organization',
        )
        export_order = fields

    def dehydrate_seat(self, user):
        return _name_or_blank(user.seat)

    def dehydrate_department(self, user):
        return _name_or_blank(user.department)

    def dehydrate_branch(self, user):
        return _name_or_blank(user.branch)

    def dehydrate_organization(self, user):
        return _name_or_blank(user.organization)
