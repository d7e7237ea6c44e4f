from rest_framework import serializers

from .models import Company, User


class CompanySerializer(serializers.ModelSerializer):
    owner = serializers.CharField(source="owner.username", read_only=True)

    class Meta:
        model = Company
        fields = ("id", "name", "capacity", "location", "owner", "created_at")
        read_only_fields = fields


class CompanyUpdateSerializer(serializers.Serializer):
    """Partial update: only the keys present in the request are applied."""

    name = serializers.CharField(max_length=255, required=False)
    capacity = serializers.CharField(max_length=100, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)


class UserSerializer(serializers.ModelSerializer):
    company_id = serializers.IntegerField(source="owned_company_id", read_only=True)

    class Meta:
        model = User
        fields = ("id", "username", "role", "company_id")


class RegistrationSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    company_name = serializers.CharField(max_length=255)
    capacity = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, trim_whitespace=False)
