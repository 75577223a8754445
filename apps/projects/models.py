from django.core.validators import RegexValidator
from django.db import models

from apps.core.models import OwnedModel

hex_color_validator = RegexValidator(
    regex=r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$',
    message='Color must be a valid hex color code',
)


class Project(OwnedModel):
    """A site or venture that expenses, customers and payments are booked against."""

    name = models.CharField(max_length=100)
    color = models.CharField(max_length=7, validators=[hex_color_validator])
    location = models.CharField(max_length=500)
    commence_date = models.DateField()

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['owner', 'name'], name='unique_project_name_per_owner'),
        ]

    def __str__(self):
        return self.name
