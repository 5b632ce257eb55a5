"""
Tests de estudiantes e inscripciones.

Cubre:
- CRUD de Estudiante con identificador asignado por el cliente
- Relación muchos a muchos con Curso a través de la tabla intermedia
- Inscripciones duplicadas
"""
from rest_framework import status
from rest_framework.test import APITestCase

from apps.courses.models import Curso
from .models import Estudiante, EstudianteCurso


class EstudianteAPITest(APITestCase):
    """Endpoints /estudiantes/"""

    def setUp(self):
        self.estudiante = Estudiante.objects.create(id_estudiante=1, nombre='Andrea', apellido='Mendoza')
        self.curso = Curso.objects.create(id_curso=1, nombre='Matemáticas')
        EstudianteCurso.objects.create(id_estudiante=self.estudiante, id_curso=self.curso)

    def test_list_eager_loads_cursos(self):
        otro = Estudiante.objects.create(id_estudiante=2, nombre='Diego', apellido='Rojas')
        EstudianteCurso.objects.create(id_estudiante=otro, id_curso=self.curso)

        # tenant del host + estudiantes + cursos precargados
        with self.assertNumQueries(3):
            response = self.client.get('/estudiantes/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]['cursos'], [{'id_curso': 1, 'nombre': 'Matemáticas'}])

    def test_list_filters_by_curso(self):
        Estudiante.objects.create(id_estudiante=2, nombre='Diego', apellido='Rojas')

        response = self.client.get('/estudiantes/', {'cursos': 1})

        self.assertEqual([e['id_estudiante'] for e in response.data], [1])

    def test_create_then_get(self):
        payload = {'id_estudiante': 5, 'nombre': 'Valeria', 'apellido': 'Castro'}
        response = self.client.post('/estudiantes/', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data, payload)

        response = self.client.get('/estudiantes/5/')
        self.assertEqual(response.data, payload)

    def test_update_changes_only_supplied_fields(self):
        response = self.client.patch('/estudiantes/1/', {'apellido': 'Mendoza Ríos'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['nombre'], 'Andrea')
        self.assertEqual(response.data['apellido'], 'Mendoza Ríos')

    def test_delete_then_get_returns_404(self):
        response = self.client.delete('/estudiantes/1/')
        self.assertEqual(response.data, {'message': 'Estudiante eliminado'})

        response = self.client.get('/estudiantes/1/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(EstudianteCurso.objects.exists())


class InscripcionAPITest(APITestCase):
    """Endpoints /inscripciones/"""

    def setUp(self):
        self.estudiante = Estudiante.objects.create(id_estudiante=1, nombre='Andrea', apellido='Mendoza')
        self.curso = Curso.objects.create(id_curso=1, nombre='Matemáticas')

    def test_enroll(self):
        response = self.client.post('/inscripciones/', {'id_estudiante': 1, 'id_curso': 1}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['estudiante_nombre'], 'Andrea Mendoza')
        self.assertEqual(response.data['curso_nombre'], 'Matemáticas')
        self.assertEqual(list(self.estudiante.cursos.all()), [self.curso])

    def test_enroll_same_pair_twice_fails(self):
        self.client.post('/inscripciones/', {'id_estudiante': 1, 'id_curso': 1}, format='json')

        response = self.client.post('/inscripciones/', {'id_estudiante': 1, 'id_curso': 1}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('non_field_errors', response.data)
        self.assertEqual(EstudianteCurso.objects.count(), 1)

    def test_enroll_unknown_curso_fails(self):
        response = self.client.post('/inscripciones/', {'id_estudiante': 1, 'id_curso': 9}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('id_curso', response.data)

    def test_unenroll(self):
        inscripcion = EstudianteCurso.objects.create(id_estudiante=self.estudiante, id_curso=self.curso)

        response = self.client.delete(f'/inscripciones/{inscripcion.id}/')

        self.assertEqual(response.data, {'message': 'Inscripción eliminada'})
        self.assertFalse(EstudianteCurso.objects.exists())

    def test_update_not_allowed(self):
        inscripcion = EstudianteCurso.objects.create(id_estudiante=self.estudiante, id_curso=self.curso)

        response = self.client.put(f'/inscripciones/{inscripcion.id}/', {'id_curso': 1}, format='json')

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
