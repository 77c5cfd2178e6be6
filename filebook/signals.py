# 📁 filebook/signals.py
import logging

from django.dispatch import receiver

from filebook.models import Inward, Sender, Document, User, Address, soft_deleted

logger = logging.getLogger(__name__)


@receiver(soft_deleted, sender=Inward)
def soft_delete_inward_children(sender, instance, **kwargs):
    """
    При мягком удалении входящего удаляются его отправитель и вложения.
    """
    senders = Sender.objects.filter(inward=instance)
    documents = Document.objects.filter(inward=instance)
    removed_senders, _ = senders.delete()
    removed_documents, _ = documents.delete()
    logger.info(
        "Inward #%s soft deleted with %s sender(s) and %s document(s)",
        instance.pk, removed_senders, removed_documents
    )


@receiver(soft_deleted, sender=User)
def soft_delete_user_addresses(sender, instance, **kwargs):
    """
    Адреса удалённого пользователя тоже помечаются удалёнными.
    """
    Address.objects.filter(user=instance).delete()
