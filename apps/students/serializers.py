#apps/students/serializers.py:

from rest_framework import serializers
from rest_framework.validators import UniqueTogetherValidator
from apps.common.serializers import PatchModelSerializer
from apps.courses.serializers import CursoSerializer
from .models import Estudiante, EstudianteCurso

class EstudianteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Estudiante
        fields = ['id_estudiante', 'nombre', 'apellido']

class EstudianteCursosSerializer(serializers.ModelSerializer):
    """Estudiante con los cursos en los que está inscrito"""
    cursos = CursoSerializer(many=True, read_only=True)
    
    class Meta:
        model = Estudiante
        fields = ['id_estudiante', 'nombre', 'apellido', 'cursos']

class EstudianteCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Estudiante
        fields = ['id_estudiante', 'nombre', 'apellido']
        extra_kwargs = {
            'id_estudiante': {'validators': []},
        }
    
    def validate_id_estudiante(self, value):
        if Estudiante.objects.filter(id_estudiante=value).exists():
            raise serializers.ValidationError("Ya existe un estudiante con este identificador")
        return value

class EstudianteUpdateSerializer(PatchModelSerializer):
    class Meta:
        model = Estudiante
        fields = ['nombre', 'apellido']

class InscripcionSerializer(serializers.ModelSerializer):
    estudiante_nombre = serializers.CharField(source='id_estudiante.nombre_completo', read_only=True)
    curso_nombre = serializers.CharField(source='id_curso.nombre', read_only=True)
    
    class Meta:
        model = EstudianteCurso
        fields = ['id', 'id_estudiante', 'id_curso', 'estudiante_nombre', 'curso_nombre']

class InscripcionCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = EstudianteCurso
        fields = ['id_estudiante', 'id_curso']
        extra_kwargs = {
            'id_estudiante': {
                'error_messages': {'does_not_exist': 'No existe un estudiante con el identificador "{pk_value}"'},
            },
            'id_curso': {
                'error_messages': {'does_not_exist': 'No existe un curso con el identificador "{pk_value}"'},
            },
        }
        validators = [
            UniqueTogetherValidator(
                queryset=EstudianteCurso.objects.all(),
                fields=['id_estudiante', 'id_curso'],
                message='El estudiante ya está inscrito en este curso'
            )
        ]
