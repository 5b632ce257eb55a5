#apps/personas/serializers.py:

from rest_framework import serializers
from apps.common.serializers import PatchModelSerializer
from .models import Persona, Pasaporte

class PersonaSerializer(serializers.ModelSerializer):
    class Meta:
        model = Persona
        fields = ['id_persona', 'nombre', 'apellido_paterno', 'apellido_materno']

class PersonaCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Persona
        fields = ['id_persona', 'nombre', 'apellido_paterno', 'apellido_materno']
        extra_kwargs = {
            'id_persona': {
                'validators': [],
            },
        }
    
    def validate_id_persona(self, value):
        if Persona.objects.filter(id_persona=value).exists():
            raise serializers.ValidationError("Ya existe una persona con este identificador")
        return value

class PersonaUpdateSerializer(PatchModelSerializer):
    """Actualización parcial: el identificador no se modifica"""
    
    class Meta:
        model = Persona
        fields = ['nombre', 'apellido_paterno', 'apellido_materno']

class PasaporteSerializer(serializers.ModelSerializer):
    persona_nombre = serializers.CharField(source='id_persona.nombre_completo', read_only=True)
    
    class Meta:
        model = Pasaporte
        fields = ['id_pasaporte', 'numero', 'id_persona', 'persona_nombre']

class PasaporteCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Pasaporte
        fields = ['id_pasaporte', 'numero', 'id_persona']
        extra_kwargs = {
            'id_pasaporte': {
                'validators': [],
            },
            'id_persona': {
                'validators': [],
                'error_messages': {
                    'does_not_exist': 'No existe una persona con el identificador "{pk_value}"',
                },
            },
        }
    
    def validate_id_pasaporte(self, value):
        if Pasaporte.objects.filter(id_pasaporte=value).exists():
            raise serializers.ValidationError("Ya existe un pasaporte con este identificador")
        return value
    
    def validate_id_persona(self, value):
        # Relación uno a uno: una persona solo puede tener un pasaporte
        if Pasaporte.objects.filter(id_persona=value).exists():
            raise serializers.ValidationError("Esta persona ya tiene un pasaporte asignado")
        return value

class PasaporteUpdateSerializer(PatchModelSerializer):
    class Meta:
        model = Pasaporte
        fields = ['numero', 'id_persona']
        extra_kwargs = {
            'id_persona': {
                'validators': [],
                'error_messages': {
                    'does_not_exist': 'No existe una persona con el identificador "{pk_value}"',
                },
            },
        }
    
    def validate_id_persona(self, value):
        pasaporte = self.instance
        if Pasaporte.objects.exclude(id_pasaporte=pasaporte.id_pasaporte).filter(id_persona=value).exists():
            raise serializers.ValidationError("Esta persona ya tiene un pasaporte asignado")
        return value
