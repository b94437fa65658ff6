"""
Views for client management.
"""

from django.db import transaction
from django.db.models import Q

from rest_framework import generics

from apps.core.audit import schedule_audit_log
from apps.core.permissions import IsAdminOrReadOnly

from .models import Client
from .serializers import ClientSerializer


class ClientListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing and creating clients.

    Query parameters:
    - search: Search by name, email or phone
    """

    serializer_class = ClientSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        queryset = Client.objects.order_by("-join_date")

        search = self.request.query_params.get("search")
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) | Q(email__icontains=search) | Q(phone__icontains=search)
            )

        return queryset

    def perform_create(self, serializer):
        client = serializer.save()
        schedule_audit_log(
            self.request.user,
            action="CREATE",
            entity="Client",
            entity_id=client.id,
            details=f"Created client {client.name}",
        )


class ClientDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for retrieving, updating and deleting a single client.
    """

    serializer_class = ClientSerializer
    permission_classes = [IsAdminOrReadOnly]
    queryset = Client.objects.all()

    def perform_update(self, serializer):
        client = serializer.save()
        schedule_audit_log(
            self.request.user,
            action="UPDATE",
            entity="Client",
            entity_id=client.id,
            details=f"Updated fields: {', '.join(sorted(serializer.validated_data))}",
        )

    @transaction.atomic
    def perform_destroy(self, instance):
        client_id, name = instance.id, instance.name
        instance.delete()
        schedule_audit_log(
            self.request.user,
            action="DELETE",
            entity="Client",
            entity_id=client_id,
            details=f"Deleted client {name}",
        )
