from rest_framework import serializers

from apps.core.filters import ListQuerySerializer
from .models import Category, Icon, Subcategory, slug_validator
from .services import normalize_slug


class CategoryFilterSerializer(ListQuerySerializer):
    """
    Validate query parameters for category listing.

    Query Parameters:
        search (str): Category name, ID or any subcategory name contains
        sort_by (str): name or created
    """

    search_fields = ('name', 'slug', 'subcategories__name')
    sort_fields = {
        'name': 'name',
        'created': 'created_at',
    }
    default_sort = 'name'
    default_order = 'asc'
    date_field = None

    def filter_queryset(self, queryset):
        # Subcategory search joins rows; collapse them again
        return super().filter_queryset(queryset).distinct()


class SlugField(serializers.CharField):
    """ID input: trimmed and lower-cased before the character check."""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_length', 50)
        super().__init__(**kwargs)
        self.validators.append(slug_validator)

    def to_internal_value(self, data):
        return normalize_slug(super().to_internal_value(data))


class SubcategorySerializer(serializers.ModelSerializer):
    id = SlugField(source='slug')
    icon = serializers.ChoiceField(choices=Icon.choices, default=Icon.LAYERS)

    class Meta:
        model = Subcategory
        fields = ['id', 'name', 'icon']


class CategorySerializer(serializers.ModelSerializer):
    """
    Category with its nested subcategories.

    ``id`` is the category's natural key and cannot change once created.
    """

    id = SlugField(source='slug')
    icon = serializers.ChoiceField(choices=Icon.choices, default=Icon.TAG)
    subcategories = SubcategorySerializer(many=True)

    class Meta:
        model = Category
        fields = [
            'id',
            'name',
            'icon',
            'subcategories',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['created_at', 'updated_at']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance is not None and not isinstance(self.instance, (list, tuple)):
            self.fields['id'].read_only = True

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Category name is required')
        return value

    def validate_subcategories(self, value):
        if not value:
            raise serializers.ValidationError('At least one subcategory is required')

        seen = set()
        for sub in value:
            slug = sub['slug']
            if slug in seen:
                raise serializers.ValidationError(f"Duplicate subcategory ID '{slug}'")
            seen.add(slug)
        return value


class CategoryStatsSerializer(serializers.Serializer):
    total_categories = serializers.IntegerField()
    total_subcategories = serializers.IntegerField()
    active_categories = serializers.IntegerField()
