#apps/posts/views.py:

from django.conf import settings
from rest_framework import viewsets
from rest_framework.response import Response
from apps.tenants.serializers import TenantSerializer
from .serializers import PostSerializer
from .services import posts_for_tenant

class PostViewSet(viewsets.GenericViewSet):
    """Posts del tenant resuelto a partir del host de la petición"""
    serializer_class = PostSerializer
    filter_backends = []
    
    def get_queryset(self):
        return posts_for_tenant(
            self.request.tenant,
            allow_unscoped=settings.TENANT_UNSCOPED_FALLBACK
        )
    
    def list(self, request, *args, **kwargs):
        tenant = request.tenant
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({
            'posts': serializer.data,
            'currentTenant': TenantSerializer(tenant).data if tenant else None,
        })
