from django.db import models

from filebook.constants import SENDER_TYPES, as_choices
from .base import TimeStampedModel


class Sender(TimeStampedModel):
    """
    ✉️ Отправитель входящего. Принадлежит ровно одному Inward.
    """
    TYPE_CHOICES = as_choices(SENDER_TYPES)

    inward = models.OneToOneField(
        'filebook.Inward',
        on_delete=models.CASCADE,
        related_name="sender",
        verbose_name="Входящее"
    )
    name = models.CharField("Имя / наименование", max_length=255)
    sender_type = models.CharField(
        "Тип отправителя",
        max_length=20,
        choices=TYPE_CHOICES,
        blank=True
    )
    email = models.EmailField("Email", blank=True)
    phone = models.CharField("Телефон", max_length=50, blank=True)
    address = models.TextField("Адрес", blank=True)

    class Meta:
        verbose_name = "✉️ Отправитель"
        verbose_name_plural = "✉️ Отправители"
        ordering = ['name']

    def __str__(self):
        return self.name
