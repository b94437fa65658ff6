"""
Serializers for CRM models.
"""

from rest_framework import serializers

from .models import Client


class ClientSerializer(serializers.ModelSerializer):
    """
    Serializer for clients.

    Loyalty aggregates are exposed read-only; they only change through
    committed sales.
    """

    class Meta:
        model = Client
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "total_spent",
            "total_orders",
            "last_purchase",
            "join_date",
        ]
        read_only_fields = ["id", "total_spent", "total_orders", "last_purchase", "join_date"]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name cannot be blank.")
        return value

    def update(self, instance, validated_data):
        """
        Update only the submitted contact fields.

        Loyalty counters are written by sale commits alone, so they are never
        part of the saved columns here.
        """
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if validated_data:
            instance.save(update_fields=list(validated_data))
        instance.refresh_from_db()
        return instance
