#apps/clientes/views.py:

from rest_framework import viewsets
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter
from apps.common.mixins import CrudViewSetMixin
from .models import Cliente, Pedido
from .serializers import (
    ClienteSerializer, ClientePedidosSerializer, ClienteCreateSerializer, ClienteUpdateSerializer,
    PedidoSerializer, PedidoCreateSerializer, PedidoUpdateSerializer
)

class ClienteViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    queryset = Cliente.objects.all()
    serializer_class = ClienteSerializer
    list_serializer_class = ClientePedidosSerializer
    create_serializer_class = ClienteCreateSerializer
    update_serializer_class = ClienteUpdateSerializer
    mensaje_eliminado = 'Cliente eliminado'
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['estado_cuenta', 'tipo_cliente', 'ciudad', 'pais']
    search_fields = ['nombre', 'apellido', 'correo']
    ordering_fields = ['id_cliente', 'fecha_registro', 'apellido']
    ordering = ['id_cliente']
    
    def get_queryset(self):
        queryset = super().get_queryset()
        # Los pedidos se precargan en una sola consulta para el listado
        if self.action == 'list':
            queryset = queryset.prefetch_related('pedidos')
        return queryset

class PedidoViewSet(CrudViewSetMixin, viewsets.ModelViewSet):
    queryset = Pedido.objects.all()
    serializer_class = PedidoSerializer
    create_serializer_class = PedidoCreateSerializer
    update_serializer_class = PedidoUpdateSerializer
    mensaje_eliminado = 'Pedido eliminado'
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['id_cliente', 'estado_pedido', 'metodo_pago']
    search_fields = ['direccion_envio', 'ciudad_envio', 'observaciones']
    ordering_fields = ['id_pedido', 'fecha', 'total']
    ordering = ['id_pedido']
