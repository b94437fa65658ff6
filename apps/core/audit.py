"""
Fire-and-forget audit logging.

Audit events are dispatched only after the surrounding database transaction
commits. Dispatch failures are logged and swallowed: an audit problem must
never undo or fail the action being audited.
"""

import logging
from functools import partial

from django.db import transaction

logger = logging.getLogger(__name__)


def schedule_audit_log(user, action, entity, entity_id=None, details=None):
    """
    Queue an audit event to be recorded after the current transaction commits.

    Outside of an atomic block the event is dispatched immediately. Calls
    without an authenticated user are skipped silently.

    Args:
        user: User who performed the action
        action: Action performed (e.g. CREATE)
        entity: Kind of record affected (e.g. Sale)
        entity_id: Identifier of the affected record (optional)
        details: Human-readable description (optional)
    """
    if user is None or not user.is_authenticated:
        return

    transaction.on_commit(
        partial(
            _dispatch_audit_log,
            user_id=user.pk,
            action=action,
            entity=entity,
            entity_id=str(entity_id) if entity_id is not None else None,
            details=details,
        )
    )


def _dispatch_audit_log(**payload):
    from apps.core.tasks import record_audit_log

    try:
        record_audit_log.delay(**payload)
    except Exception as e:
        logger.warning(
            f"Audit log dispatch failed for {payload.get('action')} {payload.get('entity')}: {e}",
            exc_info=True,
        )
