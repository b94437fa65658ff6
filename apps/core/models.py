"""
Core models for the point-of-sale backend.

Holds the custom user model (with its admin/viewer role) and the audit log
written after every successful administrative change.
"""

import uuid

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Extended user model with a shop role.

    Admins can run checkouts and edit the catalog and client list; viewers
    get read-only access to everything.
    """

    # Role choices
    ADMIN = "admin"
    VIEWER = "viewer"

    ROLE_CHOICES = [
        (ADMIN, "Administrator"),
        (VIEWER, "Viewer"),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=VIEWER,
        help_text="User's role in the shop",
    )

    class Meta:
        db_table = "users"
        ordering = ["username"]
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    @property
    def effective_role(self):
        """
        Role used for access decisions.

        Unknown or blank roles fall back to read-only access.
        """
        if self.role in (self.ADMIN, self.VIEWER):
            return self.role
        return self.VIEWER

    def is_admin(self):
        """Check if user can perform write operations."""
        return self.effective_role == self.ADMIN

    def is_viewer(self):
        """Check if user is limited to read-only access."""
        return self.effective_role == self.VIEWER


class AuditLog(models.Model):
    """
    Audit trail entry for an administrative action.

    Entries are written best-effort after the action's transaction has
    committed, so a missing entry never means the action did not happen.
    """

    # Common actions
    ACTION_CREATE = "CREATE"
    ACTION_UPDATE = "UPDATE"
    ACTION_DELETE = "DELETE"

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the audit log entry",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="audit_logs",
        help_text="User who performed the action",
    )

    action = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Action performed (e.g. CREATE, UPDATE, DELETE)",
    )

    entity = models.CharField(
        max_length=50,
        db_index=True,
        help_text="Kind of record affected (e.g. Sale, Product)",
    )

    entity_id = models.CharField(
        max_length=100,
        blank=True,
        help_text="Identifier of the affected record",
    )

    details = models.TextField(
        max_length=1000,
        blank=True,
        help_text="Human-readable description of the change",
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When the action was recorded",
    )

    class Meta:
        db_table = "audit_logs"
        ordering = ["-created_at"]
        verbose_name = "Audit Log"
        verbose_name_plural = "Audit Logs"

    def __str__(self):
        return f"{self.action} {self.entity} {self.entity_id}".strip()
