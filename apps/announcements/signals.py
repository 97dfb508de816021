from django.db import transaction
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .cache import invalidate_announcement_reads
from .channel import AnnouncementInserted, announcement_channel
from .models import Announcement


@receiver(post_save, sender=Announcement, dispatch_uid='publish_announcement_insert')
def publish_announcement_insert(sender, instance, created, **kwargs):
    """Publish inserts once the creating transaction has committed."""
    if not created:
        return
    event = AnnouncementInserted.from_announcement(instance)
    transaction.on_commit(lambda: announcement_channel.publish(event))


@receiver(post_save, sender=Announcement, dispatch_uid='invalidate_reads_on_save')
@receiver(post_delete, sender=Announcement, dispatch_uid='invalidate_reads_on_delete')
def invalidate_reads_on_change(sender, **kwargs):
    # Any write path counts: services, admin, shell, management commands
    transaction.on_commit(invalidate_announcement_reads)
