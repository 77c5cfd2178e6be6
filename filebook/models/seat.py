from django.db import models

from .base import TimeStampedModel


class Seat(TimeStampedModel):
    """
    💺 Штатное место. Принадлежит отделу, филиалу и/или организации,
    занимающие его пользователи доступны через seat.occupants.
    """
    name = models.CharField("Наименование", max_length=255)
    code = models.CharField("Код", max_length=50, blank=True)
    organization = models.ForeignKey(
        'filebook.Organization',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="seats",
        verbose_name="Организация"
    )
    branch = models.ForeignKey(
        'filebook.Branch',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="seats",
        verbose_name="Филиал"
    )
    department = models.ForeignKey(
        'filebook.Department',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="seats",
        verbose_name="Отдел"
    )

    class Meta:
        verbose_name = "💺 Место"
        verbose_name_plural = "💺 Места"
        ordering = ['name']

    def __str__(self):
        if self.code:
            return f"{self.name} ({self.code})"
        return self.name
