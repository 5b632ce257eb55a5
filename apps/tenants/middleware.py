#apps/tenants/middleware.py:

import logging

from django.http.request import split_domain_port

from .models import Tenant

logger = logging.getLogger(__name__)


def host_from_request(request):
    """Host de la petición sin puerto y en minúsculas (admite IPv6 entre corchetes)"""
    return split_domain_port(request.get_host())[0]


class TenantMiddleware:
    """
    Determina el tenant de la petición a partir del host.

    Deja el resultado en request.tenant (None si ningún dominio coincide).
    No hay estado global: las vistas leen el tenant del request y lo pasan
    explícitamente a los servicios.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        host = host_from_request(request)
        request.tenant_host = host
        request.tenant = Tenant.for_host(host)
        if request.tenant is None:
            logger.debug(f"Sin tenant para el host '{host}'")
        return self.get_response(request)
