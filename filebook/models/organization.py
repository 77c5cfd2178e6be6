from django.db import models

from .base import TimeStampedModel


class Organization(TimeStampedModel):
    """
    🏢 Организация.
    """
    name = models.CharField("Наименование", max_length=255)
    address = models.TextField("Адрес", blank=True)
    contact = models.CharField("Контакт", max_length=255, blank=True)
    website = models.CharField("Сайт", max_length=255, blank=True)
    pr_contact = models.CharField("Контакт по связям с общественностью", max_length=255, blank=True)

    class Meta:
        verbose_name = "🏢 Организация"
        verbose_name_plural = "🏢 Организации"
        ordering = ['name']

    def __str__(self):
        return self.name
