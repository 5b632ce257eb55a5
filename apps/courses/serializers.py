#apps/courses/serializers.py:

from rest_framework import serializers
from apps.common.serializers import PatchModelSerializer
from .models import Curso

class CursoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Curso
        fields = ['id_curso', 'nombre']

class CursoListSerializer(serializers.ModelSerializer):
    estudiantes_count = serializers.IntegerField(read_only=True)
    
    class Meta:
        model = Curso
        fields = ['id_curso', 'nombre', 'estudiantes_count']

class CursoCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Curso
        fields = ['id_curso', 'nombre']
        extra_kwargs = {
            'id_curso': {'validators': []},
        }
    
    def validate_id_curso(self, value):
        if Curso.objects.filter(id_curso=value).exists():
            raise serializers.ValidationError("Ya existe un curso con este identificador")
        return value

class CursoUpdateSerializer(PatchModelSerializer):
    class Meta:
        model = Curso
        fields = ['nombre']
