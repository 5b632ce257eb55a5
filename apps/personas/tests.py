"""
Tests de personas y pasaportes.

Cubre:
- CRUD de Persona con identificador asignado por el cliente
- Relación uno a uno Persona <-> Pasaporte
- Borrado protegido de una persona con pasaporte
"""
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from .models import Persona, Pasaporte


class PersonaAPITest(APITestCase):
    """Endpoints /personas/"""

    def setUp(self):
        self.persona = Persona.objects.create(
            id_persona=1,
            nombre='Juan',
            apellido_paterno='Pérez',
            apellido_materno='Gómez'
        )

    def test_list_returns_page_payload(self):
        response = self.client.get('/personas/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('personas', response.data)
        self.assertEqual(len(response.data['personas']), 1)
        self.assertEqual(response.data['personas'][0]['nombre'], 'Juan')

    def test_create_then_get_round_trips_fields(self):
        payload = {
            'id_persona': 42,
            'nombre': 'Ana',
            'apellido_paterno': 'López',
            'apellido_materno': 'Martínez',
        }
        response = self.client.post('/personas/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, payload)

        response = self.client.get('/personas/42/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, payload)

    def test_create_requires_all_fields(self):
        response = self.client.post('/personas/', {'nombre': 'Ana'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_persona', response.data)
        self.assertIn('apellido_paterno', response.data)
        self.assertIn('apellido_materno', response.data)

    def test_create_rejects_duplicate_id(self):
        payload = {
            'id_persona': 1,
            'nombre': 'Otro',
            'apellido_paterno': 'X',
            'apellido_materno': 'Y',
        }
        response = self.client.post('/personas/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_persona', response.data)

    def test_create_rejects_long_name(self):
        payload = {
            'id_persona': 2,
            'nombre': 'x' * 51,
            'apellido_paterno': 'X',
            'apellido_materno': 'Y',
        }
        response = self.client.post('/personas/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('nombre', response.data)

    def test_update_changes_only_supplied_fields(self):
        response = self.client.put('/personas/1/', {'nombre': 'Juan Carlos'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['nombre'], 'Juan Carlos')
        self.assertEqual(response.data['apellido_paterno'], 'Pérez')
        self.assertEqual(response.data['apellido_materno'], 'Gómez')

        self.persona.refresh_from_db()
        self.assertEqual(self.persona.nombre, 'Juan Carlos')
        self.assertEqual(self.persona.apellido_paterno, 'Pérez')

    def test_update_validates_supplied_fields(self):
        response = self.client.patch('/personas/1/', {'apellido_materno': 'z' * 60}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('apellido_materno', response.data)

    def test_update_ignores_primary_key(self):
        response = self.client.put('/personas/1/', {'id_persona': 99, 'nombre': 'Juan'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['id_persona'], 1)
        self.assertFalse(Persona.objects.filter(id_persona=99).exists())

    def test_update_missing_returns_404(self):
        response = self.client.put('/personas/999/', {'nombre': 'Nadie'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_then_get_returns_404(self):
        response = self.client.delete('/personas/1/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'message': 'Persona eliminada'})

        response = self.client.get('/personas/1/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_missing_returns_404(self):
        response = self.client.delete('/personas/999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_delete_persona_with_pasaporte_is_rejected(self):
        Pasaporte.objects.create(id_pasaporte=101, numero='A123456', id_persona=self.persona)

        response = self.client.delete('/personas/1/')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertIn('error', response.data)
        self.assertTrue(Persona.objects.filter(id_persona=1).exists())


class PasaporteAPITest(APITestCase):
    """Endpoints /pasaportes/ y la relación uno a uno"""

    def setUp(self):
        self.juan = Persona.objects.create(
            id_persona=1, nombre='Juan', apellido_paterno='Pérez', apellido_materno='Gómez'
        )
        self.ana = Persona.objects.create(
            id_persona=2, nombre='Ana', apellido_paterno='López', apellido_materno='Martínez'
        )
        self.pasaporte = Pasaporte.objects.create(id_pasaporte=101, numero='A123456', id_persona=self.juan)

    def test_list_returns_page_payload(self):
        response = self.client.get('/pasaportes/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['pasaportes']), 1)
        self.assertEqual(response.data['pasaportes'][0]['id_persona'], 1)
        self.assertEqual(response.data['pasaportes'][0]['persona_nombre'], 'Juan Pérez Gómez')

    def test_create_then_get(self):
        payload = {'id_pasaporte': 102, 'numero': 'B234567', 'id_persona': 2}
        response = self.client.post('/pasaportes/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['id_pasaporte'], 102)

        response = self.client.get('/pasaportes/102/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['numero'], 'B234567')
        self.assertEqual(response.data['id_persona'], 2)

    def test_create_rejects_persona_with_pasaporte(self):
        payload = {'id_pasaporte': 102, 'numero': 'B234567', 'id_persona': 1}
        response = self.client.post('/pasaportes/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_persona', response.data)
        self.assertEqual(Pasaporte.objects.count(), 1)

    def test_create_rejects_unknown_persona(self):
        payload = {'id_pasaporte': 102, 'numero': 'B234567', 'id_persona': 77}
        response = self.client.post('/pasaportes/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_persona', response.data)

    def test_create_rejects_long_numero(self):
        payload = {'id_pasaporte': 102, 'numero': '1' * 21, 'id_persona': 2}
        response = self.client.post('/pasaportes/', payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('numero', response.data)

    def test_update_keeps_own_persona(self):
        response = self.client.put('/pasaportes/101/', {'numero': 'Z999999', 'id_persona': 1}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['numero'], 'Z999999')
        self.assertEqual(response.data['id_persona'], 1)

    def test_update_rejects_persona_of_other_pasaporte(self):
        Pasaporte.objects.create(id_pasaporte=102, numero='B234567', id_persona=self.ana)

        response = self.client.patch('/pasaportes/101/', {'id_persona': 2}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_persona', response.data)

    def test_delete_then_get_returns_404(self):
        response = self.client.delete('/pasaportes/101/')
        self.assertEqual(response.data, {'message': 'Pasaporte eliminado'})

        response = self.client.get('/pasaportes/101/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class SeedDemoCommandTest(TestCase):

    def test_loads_sample_rows(self):
        call_command('seed_demo', stdout=StringIO())

        from apps.clientes.models import Cliente, Pedido
        from apps.students.models import EstudianteCurso
        self.assertEqual(Persona.objects.count(), 5)
        self.assertEqual(Pasaporte.objects.count(), 5)
        self.assertEqual(Cliente.objects.count(), 3)
        self.assertEqual(Pedido.objects.filter(id_cliente=1).count(), 2)
        self.assertEqual(EstudianteCurso.objects.count(), 5)

    def test_can_reload_with_delete(self):
        call_command('seed_demo', stdout=StringIO())
        call_command('seed_demo', '--delete', stdout=StringIO())

        self.assertEqual(Persona.objects.count(), 5)
