#apps/tenants/serializers.py:

from rest_framework import serializers
from .models import Tenant, User

class TenantSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tenant
        fields = ['id', 'name', 'domain', 'is_active']

class UserSerializer(serializers.ModelSerializer):
    """Usuario sin credenciales"""
    
    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'tenant']
