from django.db import models

from filebook.constants import GENDERS, ROLES, GENDER_UNFILLED, as_choices
from .base import TimeStampedModel


class User(TimeStampedModel):
    """
    👤 Пользователь картотеки (не учётная запись администратора Django).

    Пароль хранится в поле password в виде, заданном FILEBOOK_PASSWORD_HASH,
    и никогда не показывается в формах и списках.
    """
    GENDER_CHOICES = as_choices(GENDERS)
    ROLE_CHOICES = as_choices(ROLES)

    name = models.CharField("Имя", max_length=255)
    phone = models.CharField("Телефон", max_length=50, blank=True)
    email = models.EmailField("Email", blank=True)
    password = models.CharField("Пароль", max_length=255, blank=True)
    dob = models.DateField("Дата рождения", null=True, blank=True)
    gender = models.CharField(
        "Пол",
        max_length=20,
        choices=GENDER_CHOICES,
        default=GENDER_UNFILLED
    )
    role = models.CharField(
        "Роль",
        max_length=20,
        choices=ROLE_CHOICES,
        blank=True
    )
    seat = models.ForeignKey(
        'filebook.Seat',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="occupants",
        verbose_name="Место"
    )
    department = models.ForeignKey(
        'filebook.Department',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
        verbose_name="Отдел"
    )
    branch = models.ForeignKey(
        'filebook.Branch',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
        verbose_name="Филиал"
    )
    organization = models.ForeignKey(
        'filebook.Organization',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
        verbose_name="Организация"
    )

    class Meta:
        verbose_name = "👤 Пользователь"
        verbose_name_plural = "👤 Пользователи"
        ordering = ['name']

    def __str__(self):
        return self.name
