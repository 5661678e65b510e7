import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import EmissionRecord

logger = logging.getLogger(__name__)


@receiver(post_save, sender=EmissionRecord, dispatch_uid="carbon_log_new_record")
def carbon_log_new_record(sender, instance: EmissionRecord, created, **kwargs):
    if created:
        logger.info(
            f"[Carbon] Recorded {instance.total_emissions} kg for user {instance.user_id} "
            f"in week {instance.week_identifier} (score {instance.score})"
        )
