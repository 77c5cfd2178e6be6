from django.db import models

from .base import TimeStampedModel


class Address(TimeStampedModel):
    """
    📮 Почтовый адрес пользователя.
    """
    user = models.ForeignKey(
        'filebook.User',
        on_delete=models.CASCADE,
        related_name="addresses",
        verbose_name="Пользователь"
    )
    address = models.TextField("Адрес", blank=True)
    city = models.CharField("Город", max_length=100, blank=True)
    pincode = models.CharField("Индекс", max_length=20, blank=True)

    class Meta:
        verbose_name = "📮 Адрес"
        verbose_name_plural = "📮 Адреса"

    def __str__(self):
        parts = [part for part in (self.address, self.city, self.pincode) if part]
        return ", ".join(parts) or f"Адрес #{self.pk}"
