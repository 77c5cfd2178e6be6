from django.db import models
from django.utils import timezone

from filebook.constants import (
    INWARD_TYPES, INWARD_MODES, INWARD_STATUSES, STATUS_RECEIVED, as_choices
)
from .base import TimeStampedModel


class Inward(TimeStampedModel):
    """
    📥 Входящая корреспонденция.

    Отправитель хранится в отдельной модели Sender (один к одному),
    вложения - в Document (один ко многим).
    """
    TYPE_CHOICES = as_choices(INWARD_TYPES)
    MODE_CHOICES = as_choices(INWARD_MODES)
    STATUS_CHOICES = as_choices(INWARD_STATUSES)

    title = models.CharField("Заголовок", max_length=255)
    inward_type = models.CharField(
        "Тип",
        max_length=20,
        choices=TYPE_CHOICES,
        blank=True
    )
    mode = models.CharField(
        "Способ получения",
        max_length=20,
        choices=MODE_CHOICES,
        blank=True
    )
    received_date = models.DateField("Дата получения", default=timezone.localdate)
    remarks = models.TextField("Примечания", blank=True)
    status = models.CharField(
        "Статус",
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_RECEIVED
    )

    class Meta:
        verbose_name = "📥 Входящее"
        verbose_name_plural = "📥 Входящие"
        ordering = ['-received_date', '-id']

    def __str__(self):
        return self.title

    @property
    def sender_or_none(self):
        """Отправитель или None, если он ещё не заполнен или удалён"""
        try:
            sender = self.sender
        except models.ObjectDoesNotExist:
            return None
        if sender.is_deleted:
            return None
        return sender
