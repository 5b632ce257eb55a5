#apps/courses/views.py:

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter
from django.db.models import Count
from apps.common.mixins import CrudViewSetMixin
from .models import Curso
from .serializers import (
    CursoSerializer, CursoListSerializer, CursoCreateSerializer, CursoUpdateSerializer
)

class CursoViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    queryset = Curso.objects.all()
    serializer_class = CursoSerializer
    list_serializer_class = CursoListSerializer
    create_serializer_class = CursoCreateSerializer
    update_serializer_class = CursoUpdateSerializer
    mensaje_eliminado = 'Curso eliminado'
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['nombre']
    search_fields = ['nombre']
    ordering_fields = ['id_curso', 'nombre', 'estudiantes_count']
    ordering = ['id_curso']
    
    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            queryset = queryset.annotate(estudiantes_count=Count('estudiantes'))
        return queryset
    
    @action(detail=True, methods=['get'])
    def estudiantes(self, request, pk=None):
        """Obtener estudiantes inscritos en un curso"""
        curso = self.get_object()
        from apps.students.serializers import EstudianteSerializer
        estudiantes = curso.estudiantes.order_by('id_estudiante')
        return Response(EstudianteSerializer(estudiantes, many=True).data)
