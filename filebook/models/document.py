import hashlib
import os

from django.db import models

from .base import TimeStampedModel


def document_upload_to(instance, filename):
    """
    Путь вложения: document/<id входящего>/attachment/<имя>.<хэш><расширение>.
    Хэш - первые 12 символов MD5 содержимого, одинаковые имена не конфликтуют.
    """
    stem, ext = os.path.splitext(os.path.basename(filename))
    digest = hashlib.md5()
    for chunk in instance.attachment.chunks():
        digest.update(chunk)
    return f"document/{instance.inward_id}/attachment/{stem}.{digest.hexdigest()[:12]}{ext.lower()}"


class Document(TimeStampedModel):
    """
    📎 Вложение входящего.
    """
    inward = models.ForeignKey(
        'filebook.Inward',
        on_delete=models.CASCADE,
        related_name="documents",
        verbose_name="Входящее"
    )
    name = models.CharField("Наименование документа", max_length=255, blank=True)
    attachment = models.FileField("Файл", upload_to=document_upload_to, max_length=500, blank=True)

    class Meta:
        verbose_name = "📎 Документ"
        verbose_name_plural = "📎 Документы"
        ordering = ['id']

    def __str__(self):
        return self.name or os.path.basename(self.attachment.name or '') or f"Документ #{self.pk}"

    def save(self, *args, **kwargs):
        # Имя по умолчанию - имя загруженного файла
        if not self.name and self.attachment:
            self.name = os.path.basename(self.attachment.name)
        super().save(*args, **kwargs)
