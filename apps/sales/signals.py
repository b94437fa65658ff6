"""
Sales signals that preserve history when catalog or client rows are deleted.

Deleting a product or client sets the sales foreign keys to NULL. Just
before that happens the current name is frozen onto the historical rows so
reports and receipts can still show it.
"""

import logging

from django.db.models.signals import pre_delete
from django.dispatch import receiver

from apps.crm.models import Client
from apps.inventory.models import Product

from .models import Sale, SaleItem

logger = logging.getLogger(__name__)


@receiver(pre_delete, sender=Product)
def snapshot_deleted_product(sender, instance, **kwargs):
    """Freeze the product name onto the sale items that reference it."""
    updated = SaleItem.objects.filter(product=instance).update(
        product_name=instance.name,
        product_deleted=True,
    )
    if updated:
        logger.info(f"Froze name of deleted product {instance.id} on {updated} sale item(s)")


@receiver(pre_delete, sender=Client)
def snapshot_deleted_client(sender, instance, **kwargs):
    """Freeze the client name onto the sales that reference it."""
    updated = Sale.objects.filter(client=instance).update(
        client_name=instance.name,
        client_deleted=True,
    )
    if updated:
        logger.info(f"Froze name of deleted client {instance.id} on {updated} sale(s)")
