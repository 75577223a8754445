from rest_framework import serializers

from apps.categories.models import Category
from apps.categories.services import normalize_slug
from apps.core.filters import AmountRangeQuerySerializer
from apps.core.models import PaymentMode
from apps.core.serializers import (
    MoneyStatsSerializer,
    OwnedPrimaryKeyRelatedField,
    PaymentDetailsSerializerMixin,
)
from apps.employees.models import Employee
from apps.landlords.models import Landlord
from apps.projects.models import Project
from .models import Expense
from .services import is_land_purchase_pair, is_salary_pair


class CategorySlugRelatedField(serializers.SlugRelatedField):
    """Category referenced by its ID, looked up among the user's categories."""

    def __init__(self, **kwargs):
        kwargs.setdefault('slug_field', 'slug')
        super().__init__(**kwargs)

    def get_queryset(self):
        queryset = super().get_queryset()
        request = self.context.get('request')
        if request is None or not request.user.is_authenticated:
            return queryset.none()
        return queryset.filter(owner=request.user)

    def to_internal_value(self, data):
        return super().to_internal_value(normalize_slug(str(data)))


class SubcategorySlugField(serializers.Field):
    """
    Subcategory ID; resolved against the category in ``validate``.

    Reads as the slug, writes as the normalised slug string.
    """

    def to_representation(self, value):
        return value.slug

    def to_internal_value(self, data):
        if not isinstance(data, str) or not data.strip():
            raise serializers.ValidationError('Subcategory is required')
        return normalize_slug(data)


class ExpenseFilterSerializer(AmountRangeQuerySerializer):
    """
    Validate query parameters for expense listing.

    Query Parameters:
        search (str): Description, category, subcategory, cheque number or
            transaction ID contains
        project (uuid): Only expenses of this project
        category (str): Category ID
        subcategory (str): Subcategory ID
        payment_mode (str): cash, online or cheque
        employee (uuid): Salary expenses of this employee
        landlord (uuid): Land purchases from this landlord
        start_date / end_date (date): Expense date range
        min_amount / max_amount (decimal): Amount range
        sort_by (str): date, amount or created
    """

    search_fields = (
        'description',
        'category__name',
        'category__slug',
        'subcategory__name',
        'subcategory__slug',
        'cheque_number',
        'transaction_id',
    )
    sort_fields = {
        'date': 'date',
        'amount': 'amount',
        'created': 'created_at',
    }
    default_sort = 'date'

    project = serializers.UUIDField(required=False)
    category = serializers.CharField(max_length=50, required=False)
    subcategory = serializers.CharField(max_length=50, required=False)
    payment_mode = serializers.ChoiceField(choices=PaymentMode.choices, required=False)
    employee = serializers.UUIDField(required=False)
    landlord = serializers.UUIDField(required=False)

    def apply_filters(self, queryset, params):
        if 'project' in params:
            queryset = queryset.filter(project_id=params['project'])
        if 'category' in params:
            queryset = queryset.filter(category__slug=normalize_slug(params['category']))
        if 'subcategory' in params:
            queryset = queryset.filter(subcategory__slug=normalize_slug(params['subcategory']))
        if 'payment_mode' in params:
            queryset = queryset.filter(payment_mode=params['payment_mode'])
        if 'employee' in params:
            queryset = queryset.filter(employee_id=params['employee'])
        if 'landlord' in params:
            queryset = queryset.filter(landlord_id=params['landlord'])
        return queryset


class ExpenseSerializer(PaymentDetailsSerializerMixin, serializers.ModelSerializer):
    """
    Main serializer for expenses.

    ``category`` and ``subcategory`` are IDs. The salary section is required
    for the salary category pair, where ``amount`` may be left out; outside
    their pairs the section fields are ignored.
    """

    project = OwnedPrimaryKeyRelatedField(queryset=Project.objects.all())
    project_name = serializers.CharField(source='project.name', read_only=True)
    category = CategorySlugRelatedField(queryset=Category.objects.all())
    category_name = serializers.CharField(source='category.name', read_only=True)
    subcategory = SubcategorySlugField()
    subcategory_name = serializers.CharField(source='subcategory.name', read_only=True)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    employee = OwnedPrimaryKeyRelatedField(
        queryset=Employee.objects.all(), required=False, allow_null=True
    )
    employee_name = serializers.CharField(source='employee.name', read_only=True, default=None)
    landlord = OwnedPrimaryKeyRelatedField(
        queryset=Landlord.objects.all(), required=False, allow_null=True
    )
    landlord_name = serializers.CharField(source='landlord.name', read_only=True, default=None)

    class Meta:
        model = Expense
        fields = [
            'id',
            'project',
            'project_name',
            'amount',
            'date',
            'category',
            'category_name',
            'subcategory',
            'subcategory_name',
            'description',
            'payment_mode',
            'cheque_number',
            'transaction_id',
            'employee',
            'employee_name',
            'salary_month',
            'override_salary',
            'landlord',
            'landlord_name',
            'land_purchase_amount',
            'land_details',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def _current(self, attrs, field):
        if field in attrs:
            return attrs[field]
        return getattr(self.instance, field, None) if self.instance is not None else None

    def validate(self, attrs):
        attrs = super().validate(attrs)

        category = self._current(attrs, 'category')
        if 'subcategory' in attrs:
            subcategory_slug = attrs['subcategory']
        elif self.instance is not None:
            subcategory_slug = self.instance.subcategory.slug
        else:
            subcategory_slug = None

        if category is None or subcategory_slug is None:
            raise serializers.ValidationError({'subcategory': 'Subcategory is required'})
        subcategory = category.subcategories.filter(slug=subcategory_slug).first()
        if subcategory is None:
            raise serializers.ValidationError({
                'subcategory': f"'{subcategory_slug}' is not a subcategory of '{category.slug}'"
            })
        attrs['subcategory'] = subcategory

        errors = {}
        if is_salary_pair(category.slug, subcategory.slug):
            if self._current(attrs, 'employee') is None:
                errors['employee'] = 'Employee is required for salary expenses'
            if not self._current(attrs, 'salary_month'):
                errors['salary_month'] = 'Salary month is required'
        else:
            amount = self._current(attrs, 'amount')
            if amount is None or amount <= 0:
                errors['amount'] = 'Amount must be greater than 0'
            if not (self._current(attrs, 'description') or '').strip():
                errors['description'] = 'Description is required'

        if is_land_purchase_pair(category.slug, subcategory.slug):
            purchase_amount = self._current(attrs, 'land_purchase_amount')
            if purchase_amount is not None and purchase_amount < 0:
                errors['land_purchase_amount'] = 'Land purchase amount cannot be negative'

        if errors:
            raise serializers.ValidationError(errors)
        return attrs


class ExpenseStatsSerializer(MoneyStatsSerializer):
    by_category = serializers.DictField(
        child=serializers.DecimalField(max_digits=16, decimal_places=2)
    )
