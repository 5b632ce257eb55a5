#apps/students/views.py:

from rest_framework import viewsets
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter
from apps.common.mixins import CrudViewSetMixin
from .models import Estudiante, EstudianteCurso
from .serializers import (
    EstudianteSerializer, EstudianteCursosSerializer, EstudianteCreateSerializer,
    EstudianteUpdateSerializer, InscripcionSerializer, InscripcionCreateSerializer
)

class EstudianteViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    queryset = Estudiante.objects.all()
    serializer_class = EstudianteSerializer
    list_serializer_class = EstudianteCursosSerializer
    create_serializer_class = EstudianteCreateSerializer
    update_serializer_class = EstudianteUpdateSerializer
    mensaje_eliminado = 'Estudiante eliminado'
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['cursos']
    search_fields = ['nombre', 'apellido']
    ordering_fields = ['id_estudiante', 'apellido', 'nombre']
    ordering = ['id_estudiante']
    
    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            queryset = queryset.prefetch_related('cursos')
        return queryset

class InscripcionViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    """Inscripciones de estudiantes en cursos (tabla intermedia)"""
    queryset = EstudianteCurso.objects.select_related('id_estudiante', 'id_curso')
    serializer_class = InscripcionSerializer
    create_serializer_class = InscripcionCreateSerializer
    mensaje_eliminado = 'Inscripción eliminada'
    http_method_names = ['get', 'post', 'delete', 'head', 'options']
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_fields = ['id_estudiante', 'id_curso']
    ordering = ['id_estudiante', 'id_curso']
