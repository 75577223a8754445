from rest_framework import serializers

from apps.core.filters import AmountRangeQuerySerializer, ListQuerySerializer
from apps.core.models import PaymentMode
from apps.core.serializers import OwnedPrimaryKeyRelatedField, PaymentDetailsSerializerMixin
from apps.projects.models import Project
from .models import Customer, CustomerPayment, PaymentCategory

BALANCE_STATUSES = ('outstanding', 'paid')


class CustomerFilterSerializer(AmountRangeQuerySerializer):
    """
    Validate query parameters for customer listing.

    Query Parameters:
        search (str): Name, plot number, phone or email contains
        project (uuid): Only customers of this project
        balance_status (str): outstanding (balance > 0) or paid
        min_amount / max_amount (decimal): Total price range
        sort_by (str): name, plot_number, total_price, balance or created
    """

    search_fields = ('name', 'plot_number', 'phone', 'email')
    sort_fields = {
        'name': 'name',
        'plot_number': 'plot_number',
        'total_price': 'total_price',
        'balance': 'balance',
        'created': 'created_at',
    }
    date_field = None
    amount_field = 'total_price'

    project = serializers.UUIDField(required=False)
    balance_status = serializers.ChoiceField(choices=BALANCE_STATUSES, required=False)

    def apply_filters(self, queryset, params):
        if 'project' in params:
            queryset = queryset.filter(project_id=params['project'])
        if params.get('balance_status') == 'outstanding':
            queryset = queryset.filter(balance__gt=0)
        elif params.get('balance_status') == 'paid':
            queryset = queryset.filter(balance__lte=0)
        return queryset


class CustomerSerializer(serializers.ModelSerializer):
    """
    Main serializer for customers.

    The balance fields are derived from payments and are read-only.
    """

    project = OwnedPrimaryKeyRelatedField(queryset=Project.objects.all())
    project_name = serializers.CharField(source='project.name', read_only=True)
    email = serializers.EmailField(required=False, allow_blank=True, default='')
    total_price = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)
    total_paid = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)
    balance = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)
    payment_progress = serializers.DecimalField(max_digits=5, decimal_places=1, read_only=True)

    class Meta:
        model = Customer
        fields = [
            'id',
            'name',
            'plot_number',
            'plot_size',
            'built_up_area',
            'project',
            'project_name',
            'sale_price',
            'price_per_yard',
            'construction_price',
            'construction_price_per_sqft',
            'phone',
            'email',
            'address',
            'total_price',
            'total_paid',
            'balance',
            'payment_progress',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError('Name must be at least 2 characters')
        return value

    def validate_plot_number(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Plot number is required')
        return value


class CustomerStatsSerializer(serializers.Serializer):
    total_customers = serializers.IntegerField()
    total_value = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_paid = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_outstanding = serializers.DecimalField(max_digits=16, decimal_places=2)
    outstanding_customers = serializers.IntegerField()


class CustomerPaymentFilterSerializer(ListQuerySerializer):
    """
    Validate query parameters for customer payment listing.

    Query Parameters:
        search (str): Customer name, description, plot or invoice number contains
        project (uuid): Only payments for this project
        customer (uuid): Only payments linked to this customer
        payment_mode (str): cash, online or cheque
        payment_category (str): token, advance, booking, ...
        start_date / end_date (date): Payment date range
        sort_by (str): date, amount, customer_name or created
    """

    search_fields = ('customer_name', 'description', 'plot_number', 'invoice_number')
    sort_fields = {
        'date': 'date',
        'amount': 'amount',
        'customer_name': 'customer_name',
        'created': 'created_at',
    }
    default_sort = 'date'

    project = serializers.UUIDField(required=False)
    customer = serializers.UUIDField(required=False)
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices, required=False)
    payment_category = serializers.ChoiceField(choices=PaymentCategory.choices, required=False)

    def apply_filters(self, queryset, params):
        if 'project' in params:
            queryset = queryset.filter(project_id=params['project'])
        if 'customer' in params:
            queryset = queryset.filter(customer_id=params['customer'])
        if 'payment_mode' in params:
            queryset = queryset.filter(payment_mode=params['payment_mode'])
        if 'payment_category' in params:
            queryset = queryset.filter(payment_category=params['payment_category'])
        return queryset


class CustomerPaymentSerializer(PaymentDetailsSerializerMixin, serializers.ModelSerializer):
    """
    Main serializer for customer payments.

    With a ``customer`` selected, the customer name, plot number, project,
    total price and construction charges may be left out and are copied
    from the customer.
    """

    customer = OwnedPrimaryKeyRelatedField(
        queryset=Customer.objects.all(),
        required=False,
        allow_null=True,
    )
    project = OwnedPrimaryKeyRelatedField(queryset=Project.objects.all(), required=False)
    project_name = serializers.CharField(source='project.name', read_only=True)
    customer_name = serializers.CharField(max_length=200, required=False)
    plot_number = serializers.CharField(max_length=50, required=False)
    total_price = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=0, required=False
    )
    construction_charges = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=0, required=False
    )

    class Meta:
        model = CustomerPayment
        fields = [
            'id',
            'amount',
            'date',
            'description',
            'payment_mode',
            'cheque_number',
            'transaction_id',
            'customer',
            'customer_name',
            'invoice_number',
            'project',
            'project_name',
            'plot_number',
            'payment_category',
            'total_price',
            'development_charges',
            'clubhouse_charges',
            'construction_charges',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError('Amount must be greater than 0')
        return value

    def validate_description(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Description is required')
        return value

    def validate(self, attrs):
        attrs = super().validate(attrs)

        customer = attrs.get('customer')
        if customer is None and self.instance is not None and 'customer' not in attrs:
            customer = self.instance.customer
        if customer is not None:
            return attrs

        # Without a customer every derived field has to come from the request
        errors = {}
        for field in ('customer_name', 'plot_number', 'project', 'total_price'):
            value = attrs.get(field)
            if value is None and self.instance is not None:
                value = getattr(self.instance, field)
            if value in (None, ''):
                errors[field] = 'This field is required when no customer is selected.'
        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class CustomerPaymentStatsSerializer(serializers.Serializer):
    total_due = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_received = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_pending = serializers.DecimalField(max_digits=16, decimal_places=2)
    unique_customers = serializers.IntegerField()
    by_category = serializers.DictField(
        child=serializers.DecimalField(max_digits=16, decimal_places=2)
    )
