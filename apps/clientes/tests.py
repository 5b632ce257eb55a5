"""
Tests de clientes y pedidos.

Cubre:
- CRUD de Cliente con identificador asignado por el cliente
- Relación uno a muchos Cliente -> Pedido (precarga en el listado)
- Validación de llave foránea, fechas, correo y montos
"""
from datetime import date
from decimal import Decimal

from rest_framework import status
from rest_framework.test import APITestCase

from .models import Cliente, Pedido


def cliente_payload(**overrides):
    data = {
        'id_cliente': 10,
        'nombre': 'Pedro',
        'apellido': 'Ramírez',
        'correo': 'pedro@x.com',
        'telefono': '555-1234',
        'direccion': 'Calle 1 #123',
        'ciudad': 'Ciudad A',
        'pais': 'País X',
        'fecha_registro': '2024-01-10',
        'estado_cuenta': 'activo',
        'tipo_cliente': 'regular',
    }
    data.update(overrides)
    return data


def pedido_payload(**overrides):
    data = {
        'id_pedido': 1001,
        'fecha': '2024-03-01',
        'id_cliente': 1,
        'total': '150.75',
        'metodo_pago': 'tarjeta',
        'estado_pedido': 'enviado',
        'direccion_envio': 'Calle 1 #123',
        'ciudad_envio': 'Ciudad A',
        'pais_envio': 'País X',
        'fecha_envio': '2024-03-02',
        'observaciones': 'Entregar por la mañana',
    }
    data.update(overrides)
    return data


class ClienteAPITest(APITestCase):
    """Endpoints /clientes/"""

    def setUp(self):
        self.cliente = Cliente.objects.create(
            id_cliente=1,
            nombre='Lucía',
            apellido='Gómez',
            correo='lucia.gomez@email.com',
            telefono='555-5678',
            direccion='Avenida 2 #456',
            ciudad='Ciudad B',
            pais='País Y',
            fecha_registro=date(2024, 2, 15),
            estado_cuenta='inactivo',
            tipo_cliente='premium'
        )

    def test_create_keeps_caller_supplied_id(self):
        payload = cliente_payload()
        response = self.client.post('/clientes/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, payload)

        response = self.client.get('/clientes/10/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, payload)

    def test_create_rejects_invalid_email_and_date(self):
        payload = cliente_payload(correo='no-es-correo', fecha_registro='10/01/2024')
        response = self.client.post('/clientes/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('correo', response.data)
        self.assertIn('fecha_registro', response.data)

    def test_create_rejects_duplicate_id(self):
        response = self.client.post('/clientes/', cliente_payload(id_cliente=1), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_cliente', response.data)

    def test_list_eager_loads_pedidos(self):
        Pedido.objects.create(
            id_pedido=1001,
            fecha=date(2024, 3, 1),
            id_cliente=self.cliente,
            total=Decimal('150.75'),
            metodo_pago='tarjeta',
            estado_pedido='enviado',
            direccion_envio='Avenida 2 #456',
            ciudad_envio='Ciudad B',
            pais_envio='País Y',
            fecha_envio=date(2024, 3, 2)
        )

        Cliente.objects.create(**dict(cliente_payload(), fecha_registro=date(2024, 1, 10)))

        # tenant del host + clientes + pedidos precargados
        with self.assertNumQueries(3):
            response = self.client.get('/clientes/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)
        self.assertEqual(len(response.data[0]['pedidos']), 1)
        self.assertEqual(response.data[1]['pedidos'], [])
        self.assertEqual(response.data[0]['pedidos'][0]['id_pedido'], 1001)

    def test_list_filters_by_tipo_cliente(self):
        Cliente.objects.create(**dict(cliente_payload(), fecha_registro=date(2024, 1, 10)))

        response = self.client.get('/clientes/', {'tipo_cliente': 'regular'})

        self.assertEqual([c['id_cliente'] for c in response.data], [10])

    def test_update_changes_only_supplied_fields(self):
        response = self.client.patch('/clientes/1/', {'estado_cuenta': 'activo'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['estado_cuenta'], 'activo')
        self.assertEqual(response.data['tipo_cliente'], 'premium')
        self.assertEqual(response.data['correo'], 'lucia.gomez@email.com')

    def test_delete_then_get_returns_404(self):
        response = self.client.delete('/clientes/1/')
        self.assertEqual(response.data, {'message': 'Cliente eliminado'})

        response = self.client.get('/clientes/1/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class PedidoAPITest(APITestCase):
    """Endpoints /pedidos/"""

    def setUp(self):
        self.cliente = Cliente.objects.create(**dict(
            cliente_payload(id_cliente=1),
            fecha_registro=date(2024, 1, 10)
        ))

    def test_create_then_get_round_trips_fields(self):
        payload = pedido_payload()
        response = self.client.post('/pedidos/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        response = self.client.get('/pedidos/1001/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, payload)

    def test_create_accepts_null_observaciones(self):
        response = self.client.post('/pedidos/', pedido_payload(observaciones=None), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(response.data['observaciones'])

    def test_create_rejects_unknown_cliente(self):
        response = self.client.post('/pedidos/', pedido_payload(id_cliente=999), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_cliente', response.data)
        self.assertFalse(Pedido.objects.exists())

    def test_create_rejects_non_numeric_total(self):
        response = self.client.post('/pedidos/', pedido_payload(total='mucho'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('total', response.data)

    def test_create_rejects_total_with_more_than_two_decimals(self):
        response = self.client.post('/pedidos/', pedido_payload(total='10.555'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('total', response.data)
        self.assertFalse(Pedido.objects.exists())

    def test_update_validates_cliente_when_supplied(self):
        self.client.post('/pedidos/', pedido_payload(), format='json')

        response = self.client.put('/pedidos/1001/', {'id_cliente': 999}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.put('/pedidos/1001/', {'estado_pedido': 'entregado'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['estado_pedido'], 'entregado')
        self.assertEqual(response.data['total'], '150.75')

    def test_delete_then_get_returns_404(self):
        self.client.post('/pedidos/', pedido_payload(), format='json')

        response = self.client.delete('/pedidos/1001/')
        self.assertEqual(response.data, {'message': 'Pedido eliminado'})

        response = self.client.get('/pedidos/1001/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_cliente_with_pedidos_is_rejected(self):
        self.client.post('/pedidos/', pedido_payload(), format='json')

        response = self.client.delete('/clientes/1/')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertTrue(Cliente.objects.filter(id_cliente=1).exists())
