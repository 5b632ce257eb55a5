#apps/common/mixins.py:

from rest_framework import status
from rest_framework.response import Response


class CrudViewSetMixin:
    """
    Comportamiento común de los ViewSets de entidades.

    - serializer_class: fila completa (detalle y respuesta de create/update)
    - list_serializer_class: listado (con relaciones precargadas)
    - create_serializer_class / update_serializer_class: validación de entrada
    - PUT y PATCH son siempre actualizaciones parciales
    - DELETE responde {'message': mensaje_eliminado}
    """
    list_serializer_class = None
    create_serializer_class = None
    update_serializer_class = None
    mensaje_eliminado = 'Registro eliminado'

    def get_serializer_class(self):
        if self.action == 'list' and self.list_serializer_class:
            return self.list_serializer_class
        elif self.action == 'create' and self.create_serializer_class:
            return self.create_serializer_class
        elif self.action in ['update', 'partial_update'] and self.update_serializer_class:
            return self.update_serializer_class
        return super().get_serializer_class()

    def get_row_data(self, instance):
        return self.serializer_class(instance, context=self.get_serializer_context()).data

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        return Response(self.get_row_data(instance), status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        return Response(self.get_row_data(instance))

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return Response({'message': self.mensaje_eliminado})
