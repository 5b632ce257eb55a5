#apps/tenants/views.py:

from django.conf import settings
from django.core.exceptions import EmptyResultSet
from django.http import Http404
from rest_framework.decorators import api_view
from rest_framework.response import Response
from apps.posts.models import Post
from apps.posts.services import posts_for_tenant
from .models import Tenant
from .serializers import TenantSerializer

@api_view(['GET'])
def debug_tenant_view(request):
    """Diagnóstico de la resolución de tenant (solo con DEBUG activo)"""
    if not settings.DEBUG:
        raise Http404
    
    tenant = request.tenant
    host = request.tenant_host
    tenant_by_domain = Tenant.for_host(host)
    scoped = posts_for_tenant(tenant, allow_unscoped=settings.TENANT_UNSCOPED_FALLBACK)
    try:
        sql = str(scoped.query)
    except EmptyResultSet:
        # Consulta vacía (sin tenant y sin fallback): no se genera SQL
        sql = None
    
    return Response({
        'debug_info': {
            'request_host': host,
            'current_tenant': TenantSerializer(tenant).data if tenant else None,
            'tenant_by_domain': TenantSerializer(tenant_by_domain).data if tenant_by_domain else None,
            'are_tenants_equal': bool(tenant and tenant_by_domain and tenant.pk == tenant_by_domain.pk),
        },
        'query_analysis': {
            'sql_query_generated': sql,
            'posts_count_without_scope': Post.objects.count(),
            'posts_count_with_scope': scoped.count(),
            'posts_with_scope_tenant_ids': sorted(set(scoped.values_list('tenant_id', flat=True))),
        },
        'configuration_check': {
            'tenant_finder': 'domain',
            'tenant_middleware': 'apps.tenants.middleware.TenantMiddleware' in settings.MIDDLEWARE,
            'unscoped_fallback': settings.TENANT_UNSCOPED_FALLBACK,
        },
    })
