from django.core.validators import RegexValidator
from django.db import models
import uuid

from apps.core.models import OwnedModel

slug_validator = RegexValidator(
    regex=r'^[a-z0-9-]+$',
    message='ID can only contain lowercase letters, numbers, and hyphens',
)


class Icon(models.TextChoices):
    """Icon identifiers; clients map them to their own glyphs."""

    SHOPPING_CART = 'ShoppingCart', 'Shopping cart'
    HOME = 'Home', 'Home'
    PIZZA = 'Pizza', 'Pizza'
    CAR = 'Car', 'Car'
    BRIEFCASE = 'Briefcase', 'Briefcase'
    WIFI = 'Wifi', 'Wifi'
    SMARTPHONE = 'Smartphone', 'Smartphone'
    HEART_PULSE = 'HeartPulse', 'Heart pulse'
    GRADUATION_CAP = 'GraduationCap', 'Graduation cap'
    PLANE = 'Plane', 'Plane'
    BUILDING = 'Building2', 'Building'
    CONSTRUCTION = 'Construction', 'Construction'
    TAG = 'Tag', 'Tag'
    LAYERS = 'Layers', 'Layers'


class Category(OwnedModel):
    """
    Top level of the two-level expense classification.

    ``slug`` is the natural key clients use as the category id.
    """

    slug = models.CharField(max_length=50, validators=[slug_validator])
    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=20, choices=Icon.choices, default=Icon.TAG)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'
        constraints = [
            models.UniqueConstraint(fields=['owner', 'slug'], name='unique_category_slug_per_owner'),
        ]

    def __str__(self):
        return self.name


class Subcategory(models.Model):
    """Second level; slugs are unique within their category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name='subcategories'
    )
    slug = models.CharField(max_length=50, validators=[slug_validator])
    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=20, choices=Icon.choices, default=Icon.LAYERS)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'subcategories'
        ordering = ['position', 'name']
        verbose_name_plural = 'subcategories'
        constraints = [
            models.UniqueConstraint(fields=['category', 'slug'], name='unique_subcategory_slug_per_category'),
        ]

    def __str__(self):
        return f"{self.category.name} / {self.name}"
