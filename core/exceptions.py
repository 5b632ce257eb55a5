# core/exceptions.py

import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Manejador de excepciones de la API.

    Delega en el manejador estándar de DRF (validación -> 400, no encontrado -> 404)
    y traduce las violaciones de integridad de la base de datos (únicos, llaves
    foráneas, borrados protegidos) a una respuesta 409 genérica.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    # ProtectedError es subclase de IntegrityError
    if isinstance(exc, IntegrityError):
        view = context.get('view')
        logger.error(f"Violación de integridad en {view.__class__.__name__ if view else 'vista'}: {exc}")
        set_rollback()
        return Response(
            {'error': 'La operación viola una restricción de integridad de la base de datos'},
            status=status.HTTP_409_CONFLICT
        )

    return None
