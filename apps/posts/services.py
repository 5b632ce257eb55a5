#apps/posts/services.py:

import logging

from .models import Post

logger = logging.getLogger(__name__)


def posts_for_tenant(tenant, allow_unscoped=False):
    """
    Posts visibles para el tenant dado, del más reciente al más antiguo.

    Sin tenant resuelto no se devuelve nada, salvo que allow_unscoped esté
    activo: en ese caso se listan los posts de todos los tenants.
    """
    queryset = Post.objects.select_related('user', 'tenant').order_by('-created_at', '-id')
    
    if tenant is not None:
        return queryset.filter(tenant_id=tenant.pk)
    
    if allow_unscoped:
        logger.warning("Listado de posts sin tenant: se exponen los posts de todos los tenants")
        return queryset
    
    logger.info("Listado de posts sin tenant resuelto: respuesta vacía")
    return queryset.none()
