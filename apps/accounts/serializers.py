from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.CharField(max_length=150, min_length=3)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    def validate_username(self, value):
        value = value.strip()
        if '@' in value:
            raise serializers.ValidationError('Username cannot contain @')
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError('A user with that username already exists')
        return value

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('A user with that email already exists')
        return value

    def validate(self, attrs):
        """Run Django's password validators against the would-be user."""
        candidate = User(username=attrs['username'], email=attrs['email'])
        try:
            validate_password(attrs['password'], user=candidate)
        except DjangoValidationError as e:
            raise serializers.ValidationError({'password': list(e.messages)})
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True, help_text="Username or e-mail address")
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
