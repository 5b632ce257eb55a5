#apps/clientes/serializers.py:

from rest_framework import serializers
from apps.common.serializers import PatchModelSerializer
from .models import Cliente, Pedido

CLIENTE_CAMPOS = [
    'nombre', 'apellido', 'correo', 'telefono', 'direccion', 'ciudad', 'pais',
    'fecha_registro', 'estado_cuenta', 'tipo_cliente'
]

PEDIDO_CAMPOS = [
    'fecha', 'id_cliente', 'total', 'metodo_pago', 'estado_pedido',
    'direccion_envio', 'ciudad_envio', 'pais_envio', 'fecha_envio', 'observaciones'
]

CLIENTE_NO_EXISTE = {'does_not_exist': 'No existe un cliente con el identificador "{pk_value}"'}

class PedidoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Pedido
        fields = ['id_pedido'] + PEDIDO_CAMPOS

class ClienteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Cliente
        fields = ['id_cliente'] + CLIENTE_CAMPOS

class ClientePedidosSerializer(serializers.ModelSerializer):
    """Cliente con su historial de pedidos"""
    pedidos = PedidoSerializer(many=True, read_only=True)
    
    class Meta:
        model = Cliente
        fields = ['id_cliente'] + CLIENTE_CAMPOS + ['pedidos']

class ClienteCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Cliente
        fields = ['id_cliente'] + CLIENTE_CAMPOS
        extra_kwargs = {
            'id_cliente': {'validators': []},
        }
    
    def validate_id_cliente(self, value):
        if Cliente.objects.filter(id_cliente=value).exists():
            raise serializers.ValidationError("Ya existe un cliente con este identificador")
        return value

class ClienteUpdateSerializer(PatchModelSerializer):
    class Meta:
        model = Cliente
        fields = CLIENTE_CAMPOS

class PedidoCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Pedido
        fields = ['id_pedido'] + PEDIDO_CAMPOS
        extra_kwargs = {
            'id_pedido': {'validators': []},
            'id_cliente': {'error_messages': CLIENTE_NO_EXISTE},
        }
    
    def validate_id_pedido(self, value):
        if Pedido.objects.filter(id_pedido=value).exists():
            raise serializers.ValidationError("Ya existe un pedido con este identificador")
        return value

class PedidoUpdateSerializer(PatchModelSerializer):
    class Meta:
        model = Pedido
        fields = PEDIDO_CAMPOS
        extra_kwargs = {
            'id_cliente': {'error_messages': CLIENTE_NO_EXISTE},
        }
