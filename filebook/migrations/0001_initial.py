from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import filebook.models.document


def timestamps():
    return [
        ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Создано')),
        ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Изменено')),
        ('deleted_at', models.DateTimeField(blank=True, db_index=True, editable=False, null=True, verbose_name='Удалено')),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Branch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('address', models.TextField(blank=True, verbose_name='Адрес')),
                ('contact', models.CharField(blank=True, max_length=255, verbose_name='Контакт')),
                ('website', models.CharField(blank=True, max_length=255, verbose_name='Сайт')),
            ],
            options={
                'verbose_name': '🏬 Филиал',
                'verbose_name_plural': '🏬 Филиалы',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Department',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('phone', models.CharField(blank=True, max_length=50, verbose_name='Телефон')),
                ('address', models.TextField(blank=True, verbose_name='Адрес')),
            ],
            options={
                'verbose_name': '📂 Отдел',
                'verbose_name_plural': '📂 Отделы',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Organization',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('address', models.TextField(blank=True, verbose_name='Адрес')),
                ('contact', models.CharField(blank=True, max_length=255, verbose_name='Контакт')),
                ('website', models.CharField(blank=True, max_length=255, verbose_name='Сайт')),
                ('pr_contact', models.CharField(blank=True, max_length=255, verbose_name='Контакт по связям с общественностью')),
            ],
            options={
                'verbose_name': '🏢 Организация',
                'verbose_name_plural': '🏢 Организации',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Inward',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('title', models.CharField(max_length=255, verbose_name='Заголовок')),
                ('inward_type', models.CharField(blank=True, choices=[('Letter', 'Letter'), ('Application', 'Application'), ('Tender', 'Tender'), ('Invitation', 'Invitation')], max_length=20, verbose_name='Тип')),
                ('mode', models.CharField(blank=True, choices=[('By Hand', 'By Hand'), ('Tele Call', 'Tele Call'), ('Email', 'Email'), ('Web Enquiry', 'Web Enquiry')], max_length=20, verbose_name='Способ получения')),
                ('received_date', models.DateField(default=django.utils.timezone.localdate, verbose_name='Дата получения')),
                ('remarks', models.TextField(blank=True, verbose_name='Примечания')),
                ('status', models.CharField(choices=[('Received', 'Received'), ('Opened', 'Opened'), ('Processed', 'Processed'), ('Rejected', 'Rejected')], default='Received', max_length=20, verbose_name='Статус')),
            ],
            options={
                'verbose_name': '📥 Входящее',
                'verbose_name_plural': '📥 Входящие',
                'ordering': ['-received_date', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Seat',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('code', models.CharField(blank=True, max_length=50, verbose_name='Код')),
                ('branch', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seats', to='filebook.branch', verbose_name='Филиал')),
                ('department', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seats', to='filebook.department', verbose_name='Отдел')),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seats', to='filebook.organization', verbose_name='Организация')),
            ],
            options={
                'verbose_name': '💺 Место',
                'verbose_name_plural': '💺 Места',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(max_length=255, verbose_name='Имя')),
                ('phone', models.CharField(blank=True, max_length=50, verbose_name='Телефон')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('password', models.CharField(blank=True, max_length=255, verbose_name='Пароль')),
                ('dob', models.DateField(blank=True, null=True, verbose_name='Дата рождения')),
                ('gender', models.CharField(choices=[('Male', 'Male'), ('Female', 'Female'), ('Other', 'Other'), ('Unfilled', 'Unfilled')], default='Unfilled', max_length=20, verbose_name='Пол')),
                ('role', models.CharField(blank=True, choices=[('Admin', 'Admin'), ('Inward Admin', 'Inward Admin'), ('Inward User', 'Inward User'), ('Root', 'Root')], max_length=20, verbose_name='Роль')),
                ('branch', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='users', to='filebook.branch', verbose_name='Филиал')),
                ('department', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='users', to='filebook.department', verbose_name='Отдел')),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='users', to='filebook.organization', verbose_name='Организация')),
                ('seat', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='occupants', to='filebook.seat', verbose_name='Место')),
            ],
            options={
                'verbose_name': '👤 Пользователь',
                'verbose_name_plural': '👤 Пользователи',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Address',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('address', models.TextField(blank=True, verbose_name='Адрес')),
                ('city', models.CharField(blank=True, max_length=100, verbose_name='Город')),
                ('pincode', models.CharField(blank=True, max_length=20, verbose_name='Индекс')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='addresses', to='filebook.user', verbose_name='Пользователь')),
            ],
            options={
                'verbose_name': '📮 Адрес',
                'verbose_name_plural': '📮 Адреса',
            },
        ),
        migrations.CreateModel(
            name='Document',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(blank=True, max_length=255, verbose_name='Наименование документа')),
                ('attachment', models.FileField(blank=True, max_length=500, upload_to=filebook.models.document.document_upload_to, verbose_name='Файл')),
                ('inward', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='filebook.inward', verbose_name='Входящее')),
            ],
            options={
                'verbose_name': '📎 Документ',
                'verbose_name_plural': '📎 Документы',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Sender',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                *timestamps(),
                ('name', models.CharField(max_length=255, verbose_name='Имя / наименование')),
                ('sender_type', models.CharField(blank=True, choices=[('Individual', 'Individual'), ('Department', 'Department'), ('Organization', 'Organization')], max_length=20, verbose_name='Тип отправителя')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('phone', models.CharField(blank=True, max_length=50, verbose_name='Телефон')),
                ('address', models.TextField(blank=True, verbose_name='Адрес')),
                ('inward', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='sender', to='filebook.inward', verbose_name='Входящее')),
            ],
            options={
                'verbose_name': '✉️ Отправитель',
                'verbose_name_plural': '✉️ Отправители',
                'ordering': ['name'],
            },
        ),
    ]
