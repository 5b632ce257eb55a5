"""
Tests de cursos.

Cubre:
- CRUD de Curso con identificador asignado por el cliente
- Conteo de estudiantes inscritos en el listado
- Estudiantes de un curso
"""
from rest_framework import status
from rest_framework.test import APITestCase

from apps.students.models import Estudiante, EstudianteCurso
from .models import Curso


class CursoAPITest(APITestCase):
    """Endpoints /cursos/"""

    def setUp(self):
        self.matematicas = Curso.objects.create(id_curso=1, nombre='Matemáticas')
        self.historia = Curso.objects.create(id_curso=2, nombre='Historia')
        self.andrea = Estudiante.objects.create(id_estudiante=1, nombre='Andrea', apellido='Mendoza')
        self.diego = Estudiante.objects.create(id_estudiante=2, nombre='Diego', apellido='Rojas')
        EstudianteCurso.objects.create(id_estudiante=self.andrea, id_curso=self.matematicas)
        EstudianteCurso.objects.create(id_estudiante=self.diego, id_curso=self.matematicas)

    def test_list_includes_estudiantes_count(self):
        response = self.client.get('/cursos/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        conteos = {c['id_curso']: c['estudiantes_count'] for c in response.data}
        self.assertEqual(conteos, {1: 2, 2: 0})

    def test_create_then_get(self):
        response = self.client.post('/cursos/', {'id_curso': 3, 'nombre': 'Programación'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, {'id_curso': 3, 'nombre': 'Programación'})

        response = self.client.get('/cursos/3/')
        self.assertEqual(response.data, {'id_curso': 3, 'nombre': 'Programación'})

    def test_create_rejects_duplicate_id(self):
        response = self.client.post('/cursos/', {'id_curso': 1, 'nombre': 'Otro'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_curso', response.data)

    def test_create_rejects_missing_id(self):
        response = self.client.post('/cursos/', {'nombre': 'Sin id'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_curso', response.data)

    def test_update_nombre(self):
        response = self.client.put('/cursos/2/', {'nombre': 'Historia Universal'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'id_curso': 2, 'nombre': 'Historia Universal'})

    def test_estudiantes_of_curso(self):
        response = self.client.get('/cursos/1/estudiantes/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([e['id_estudiante'] for e in response.data], [1, 2])

    def test_delete_removes_enrollments(self):
        response = self.client.delete('/cursos/1/')
        self.assertEqual(response.data, {'message': 'Curso eliminado'})

        self.assertEqual(self.client.get('/cursos/1/').status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(EstudianteCurso.objects.exists())
