"""
Celery tasks for audit logging.
"""

import logging

from django.contrib.auth import get_user_model

from celery import shared_task

from .models import AuditLog
from .serializers import AuditLogEntrySerializer

User = get_user_model()
logger = logging.getLogger(__name__)


@shared_task
def record_audit_log(user_id, action, entity, entity_id=None, details=None):
    """
    Persist a single audit log entry.

    Args:
        user_id: Primary key of the acting user
        action: Action performed (e.g. CREATE)
        entity: Kind of record affected (e.g. Sale)
        entity_id: Identifier of the affected record (optional)
        details: Human-readable description (optional)

    Returns:
        str: ID of the created audit log entry
    """
    payload = {"action": action, "entity": entity}
    if entity_id is not None:
        payload["entity_id"] = str(entity_id)
    if details is not None:
        payload["details"] = details

    serializer = AuditLogEntrySerializer(data=payload)
    serializer.is_valid(raise_exception=True)

    entry = AuditLog.objects.create(
        user=User.objects.filter(pk=user_id).first(),
        **serializer.validated_data,
    )
    logger.debug(f"Recorded audit log {entry.id}: {action} {entity} {entity_id or ''}")
    return str(entry.id)
