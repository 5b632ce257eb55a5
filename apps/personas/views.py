#apps/personas/views.py:

from rest_framework import viewsets
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter
from apps.common.mixins import CrudViewSetMixin
from .models import Persona, Pasaporte
from .serializers import (
    PersonaSerializer, PersonaCreateSerializer, PersonaUpdateSerializer,
    PasaporteSerializer, PasaporteCreateSerializer, PasaporteUpdateSerializer
)

class PersonaViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    queryset = Persona.objects.all()
    serializer_class = PersonaSerializer
    create_serializer_class = PersonaCreateSerializer
    update_serializer_class = PersonaUpdateSerializer
    mensaje_eliminado = 'Persona eliminada'
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['id_persona', 'apellido_paterno']
    search_fields = ['nombre', 'apellido_paterno', 'apellido_materno']
    ordering_fields = ['id_persona', 'nombre', 'apellido_paterno']
    ordering = ['id_persona']
    
    def list(self, request, *args, **kwargs):
        """Listado de personas como payload de página"""
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response({'personas': serializer.data})

class PasaporteViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    queryset = Pasaporte.objects.select_related('id_persona')
    serializer_class = PasaporteSerializer
    create_serializer_class = PasaporteCreateSerializer
    update_serializer_class = PasaporteUpdateSerializer
    mensaje_eliminado = 'Pasaporte eliminado'
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['id_persona']
    search_fields = ['numero', 'id_persona__nombre']
    ordering_fields = ['id_pasaporte', 'numero']
    ordering = ['id_pasaporte']
    
    def list(self, request, *args, **kwargs):
        """Listado de pasaportes como payload de página"""
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response({'pasaportes': serializer.data})
