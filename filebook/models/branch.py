from django.db import models

from .base import TimeStampedModel


class Branch(TimeStampedModel):
    """
    🏬 Филиал.
    """
    name = models.CharField("Наименование", max_length=255)
    address = models.TextField("Адрес", blank=True)
    contact = models.CharField("Контакт", max_length=255, blank=True)
    website = models.CharField("Сайт", max_length=255, blank=True)

    class Meta:
        verbose_name = "🏬 Филиал"
        verbose_name_plural = "🏬 Филиалы"
        ordering = ['name']

    def __str__(self):
        return self.name
