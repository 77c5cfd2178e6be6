"""
🕑 Базовая модель картотеки: метки времени и мягкое удаление.

Все сущности получают created_at / updated_at / deleted_at.
Удаление через админку только проставляет deleted_at, запись остаётся в базе
и доступна через all_objects.
"""
import logging

from django.db import models
from django.dispatch import Signal
from django.utils import timezone

logger = logging.getLogger(__name__)

# Отправляется после мягкого удаления записи (kwargs: instance)
soft_deleted = Signal()


class SoftDeleteQuerySet(models.QuerySet):
    def alive(self):
        """Только не удалённые записи"""
        return self.filter(deleted_at__isnull=True)

    def dead(self):
        """Только мягко удалённые записи"""
        return self.filter(deleted_at__isnull=False)

    def delete(self):
        """
        Мягкое удаление всей выборки.
        Идём по объектам, чтобы у каждого сработал сигнал soft_deleted.
        """
        count = 0
        for obj in self:
            obj.delete()
            count += 1
        return count, {self.model._meta.label: count}

    delete.alters_data = True
    delete.queryset_only = True

    def hard_delete(self):
        return super().delete()


class AliveManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class TimeStampedModel(models.Model):
    created_at = models.DateTimeField("Создано", auto_now_add=True)
    updated_at = models.DateTimeField("Изменено", auto_now=True)
    deleted_at = models.DateTimeField("Удалено", null=True, blank=True, editable=False, db_index=True)

    objects = AliveManager()
    all_objects = SoftDeleteQuerySet.as_manager()

    class Meta:
        abstract = True

    @property
    def is_deleted(self):
        return self.deleted_at is not None

    def delete(self, using=None, keep_parents=False):
        self.deleted_at = timezone.now()
        self.save(using=using, update_fields=['deleted_at', 'updated_at'])
        logger.info("Soft deleted %s #%s", self._meta.label, self.pk)
        soft_deleted.send(sender=self.__class__, instance=self)
        return 1, {self._meta.label: 1}

    def hard_delete(self, using=None, keep_parents=False):
        return super().delete(using=using, keep_parents=keep_parents)

    def restore(self):
        self.deleted_at = None
        self.save(update_fields=['deleted_at', 'updated_at'])
