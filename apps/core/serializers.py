"""
Serializers for core models.
"""

from rest_framework import serializers

from .models import AuditLog


class AuditLogEntrySerializer(serializers.Serializer):
    """Validates an audit event before it is persisted."""

    action = serializers.CharField(min_length=1, max_length=50)
    entity = serializers.CharField(min_length=1, max_length=50)
    entity_id = serializers.CharField(max_length=100, required=False, allow_blank=True)
    details = serializers.CharField(max_length=1000, required=False, allow_blank=True)


class AuditLogSerializer(serializers.ModelSerializer):
    """Serializer for the audit log listing."""

    user_name = serializers.SerializerMethodField()
    user_email = serializers.SerializerMethodField()

    class Meta:
        model = AuditLog
        fields = [
            "id",
            "action",
            "entity",
            "entity_id",
            "details",
            "user_name",
            "user_email",
            "created_at",
        ]

    def get_user_name(self, obj):
        if obj.user is None:
            return None
        return obj.user.get_full_name() or obj.user.username

    def get_user_email(self, obj):
        return obj.user.email if obj.user is not None else None
