from django.db import models

from .base import TimeStampedModel


class Department(TimeStampedModel):
    """
    📂 Отдел. Места (Seat) отдела доступны через department.seats.
    """
    name = models.CharField("Наименование", max_length=255)
    email = models.EmailField("Email", blank=True)
    phone = models.CharField("Телефон", max_length=50, blank=True)
    address = models.TextField("Адрес", blank=True)

    class Meta:
        verbose_name = "📂 Отдел"
        verbose_name_plural = "📂 Отделы"
        ordering = ['name']

    def __str__(self):
        return self.name
