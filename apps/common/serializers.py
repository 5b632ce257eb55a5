#apps/common/serializers.py:

from rest_framework import serializers


class PatchModelSerializer(serializers.ModelSerializer):
    """
    Serializer de actualización parcial.

    Todos los campos de Meta.fields son opcionales: solo los campos enviados
    se validan y se escriben en el registro.
    """

    def __init__(self, *args, **kwargs):
        kwargs['partial'] = True
        super().__init__(*args, **kwargs)

    def get_extra_kwargs(self):
        extra_kwargs = super().get_extra_kwargs()
        for field_name in self.Meta.fields:
            extra_kwargs.setdefault(field_name, {})['required'] = False
        return extra_kwargs
