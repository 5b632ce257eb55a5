#apps/posts/serializers.py:

from rest_framework import serializers
from apps.tenants.serializers import TenantSerializer, UserSerializer
from .models import Post

class PostSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)
    tenant = TenantSerializer(read_only=True)
    
    class Meta:
        model = Post
        fields = ['id', 'title', 'content', 'user', 'tenant', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']
