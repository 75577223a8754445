from drf_spectacular.utils import extend_schema
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.audit.models import EntityType
from apps.core.exports import CURRENCY, DATE, TEXT, ExportColumn
from apps.core.viewsets import LedgerViewSet
from .models import Customer, CustomerPayment
from .serializers import (
    CustomerFilterSerializer,
    CustomerSerializer,
    CustomerStatsSerializer,
    CustomerPaymentFilterSerializer,
    CustomerPaymentSerializer,
    CustomerPaymentStatsSerializer,
)
from .services import (
    create_customer,
    update_customer,
    delete_customer,
    get_customer_stats,
    create_payment,
    update_payment,
    delete_payment,
    get_payment_stats,
)


class CustomerViewSet(LedgerViewSet):
    """
    ViewSet for Customer CRUD operations.

    list: Customers with derived total price, amount paid and balance
    create: Create a customer (plot numbers are unique per user)
    retrieve: Get a customer with balances
    update / partial_update: Edit a customer; a rename carries linked payments
    destroy: Delete a customer without recorded payments
    """

    queryset = Customer.objects.select_related('project').with_balances()
    serializer_class = CustomerSerializer
    filter_serializer_class = CustomerFilterSerializer
    audit_entity_type = EntityType.CUSTOMER

    export_title = 'Customers'
    export_columns = (
        ExportColumn('Name', 'name'),
        ExportColumn('Plot', 'plot_number'),
        ExportColumn('Project', 'project.name'),
        ExportColumn('Phone', 'phone'),
        ExportColumn('Sale Price', 'sale_price', CURRENCY),
        ExportColumn('Construction Price', 'construction_price', CURRENCY),
        ExportColumn('Total Price', 'total_price', CURRENCY),
        ExportColumn('Paid', 'total_paid', CURRENCY),
        ExportColumn('Balance', 'balance', CURRENCY),
    )

    def create_record(self, validated_data):
        return create_customer(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_customer(customer_id=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_customer(customer_id=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_customer_stats(queryset)
        return [
            ('Customers', stats['total_customers'], TEXT),
            ('Total Value', stats['total_value'], CURRENCY),
            ('Total Paid', stats['total_paid'], CURRENCY),
            ('Outstanding', stats['total_outstanding'], CURRENCY),
        ]

    @extend_schema(responses=CustomerStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/customers/stats/summary/
        """
        return Response(get_customer_stats(self.get_queryset()))


class CustomerPaymentViewSet(LedgerViewSet):
    """
    ViewSet for CustomerPayment CRUD operations.

    list: Filtered, sorted, paginated payments
    create: Record a payment; a selected customer fills the derived fields
    retrieve: Get a payment
    update / partial_update: Edit a payment
    destroy: Delete a payment
    """

    queryset = CustomerPayment.objects.select_related('project', 'customer')
    serializer_class = CustomerPaymentSerializer
    filter_serializer_class = CustomerPaymentFilterSerializer
    audit_entity_type = EntityType.CUSTOMER_PAYMENT

    export_title = 'Customer Payments'
    export_columns = (
        ExportColumn('Date', 'date', DATE),
        ExportColumn('Customer', 'customer_name'),
        ExportColumn('Plot', 'plot_number'),
        ExportColumn('Project', 'project.name'),
        ExportColumn('Category', 'payment_category'),
        ExportColumn('Invoice', 'invoice_number'),
        ExportColumn('Payment Mode', 'payment_mode'),
        ExportColumn('Reference', 'payment_reference'),
        ExportColumn('Total Price', 'total_price', CURRENCY),
        ExportColumn('Amount', 'amount', CURRENCY),
    )

    def create_record(self, validated_data):
        return create_payment(owner=self.request.user, **validated_data)

    def update_record(self, instance, validated_data):
        return update_payment(payment_id=instance.id, owner=self.request.user, **validated_data)

    def delete_record(self, instance):
        delete_payment(payment_id=instance.id, owner=self.request.user)

    def get_export_stats(self, queryset):
        stats = get_payment_stats(queryset)
        return [
            ('Total Due', stats['total_due'], CURRENCY),
            ('Received', stats['total_received'], CURRENCY),
            ('Pending', stats['total_pending'], CURRENCY),
            ('Customers', stats['unique_customers'], TEXT),
        ]

    @extend_schema(responses=CustomerPaymentStatsSerializer)
    @action(detail=False, methods=['get'], url_path='stats/summary', url_name='stats-summary')
    def summary(self, request):
        """
        GET /api/customer-payments/stats/summary/
        """
        return Response(get_payment_stats(self.get_queryset()))
