from django.conf import settings
from django.db import models
import uuid

from apps.core.exceptions import InvalidPaymentDetailsError


class PaymentMode(models.TextChoices):
    CASH = 'cash', 'Cash'
    ONLINE = 'online', 'Online'
    CHEQUE = 'cheque', 'Cheque'


class RecordStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'


class OwnedModel(models.Model):
    """
    Base for every ledger record.

    Records belong to the user who created them; all reads and writes are
    scoped to that owner.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='+',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class PaymentDetails(models.Model):
    """Payment mode plus the mode-specific reference fields."""

    payment_mode = models.CharField(max_length=10, choices=PaymentMode.choices)
    cheque_number = models.CharField(max_length=50, blank=True)
    transaction_id = models.CharField(max_length=100, blank=True)

    class Meta:
        abstract = True

    def check_payment_details(self):
        """
        Require the reference that belongs to the payment mode and clear the other.

        Raises:
            InvalidPaymentDetailsError: If a cheque has no cheque number or an
                online payment has no transaction id
        """
        self.cheque_number = (self.cheque_number or '').strip()
        self.transaction_id = (self.transaction_id or '').strip()

        if self.payment_mode == PaymentMode.CHEQUE and not self.cheque_number:
            raise InvalidPaymentDetailsError("Cheque number is required for cheque payments")
        if self.payment_mode == PaymentMode.ONLINE and not self.transaction_id:
            raise InvalidPaymentDetailsError("Transaction ID is required for online payments")

        if self.payment_mode != PaymentMode.CHEQUE:
            self.cheque_number = ''
        if self.payment_mode != PaymentMode.ONLINE:
            self.transaction_id = ''

    @property
    def payment_reference(self):
        if self.payment_mode == PaymentMode.CHEQUE:
            return self.cheque_number
        if self.payment_mode == PaymentMode.ONLINE:
            return self.transaction_id
        return ''
