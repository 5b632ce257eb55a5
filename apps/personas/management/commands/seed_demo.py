import logging
from datetime import date
from decimal import Decimal
from django.core.management.base import BaseCommand
from django.db import transaction
from apps.personas.models import Persona, Pasaporte
from apps.clientes.models import Cliente, Pedido
from apps.courses.models import Curso
from apps.students.models import Estudiante, EstudianteCurso

logger = logging.getLogger(__name__)

class Command(BaseCommand):
    help = 'Carga datos de ejemplo para personas, pasaportes, clientes, pedidos, estudiantes y cursos'

    PERSONAS = [
        (1, 'Juan', 'Pérez', 'Gómez', 101, 'A123456'),
        (2, 'Ana', 'López', 'Martínez', 102, 'B234567'),
        (3, 'Luis', 'Ramírez', 'Sánchez', 103, 'C345678'),
        (4, 'María', 'Torres', 'Fernández', 104, 'D456789'),
        (5, 'Carlos', 'García', 'Ruiz', 105, 'E567890'),
    ]

    CLIENTES = [
        {
            'id_cliente': 1, 'nombre': 'Pedro', 'apellido': 'Ramírez', 'correo': 'pedro.ramirez@email.com',
            'telefono': '555-1234', 'direccion': 'Calle 1 #123', 'ciudad': 'Ciudad A', 'pais': 'País X',
            'fecha_registro': date(2024, 1, 10), 'estado_cuenta': 'activo', 'tipo_cliente': 'regular',
        },
        {
            'id_cliente': 2, 'nombre': 'Lucía', 'apellido': 'Gómez', 'correo': 'lucia.gomez@email.com',
            'telefono': '555-5678', 'direccion': 'Avenida 2 #456', 'ciudad': 'Ciudad B', 'pais': 'País Y',
            'fecha_registro': date(2024, 2, 15), 'estado_cuenta': 'inactivo', 'tipo_cliente': 'premium',
        },
        {
            'id_cliente': 3, 'nombre': 'Sofía', 'apellido': 'Martínez', 'correo': 'sofia.martinez@email.com',
            'telefono': '555-9999', 'direccion': 'Boulevard 3 #789', 'ciudad': 'Ciudad C', 'pais': 'País Z',
            'fecha_registro': date(2024, 3, 20), 'estado_cuenta': 'activo', 'tipo_cliente': 'vip',
        },
    ]

    PEDIDOS = [
        (1001, date(2024, 3, 1), 1, '150.75', 'tarjeta', 'enviado', date(2024, 3, 2), 'Entregar por la mañana'),
        (1002, date(2024, 3, 5), 1, '89.90', 'efectivo', 'pendiente', date(2024, 3, 7), None),
        (1003, date(2024, 3, 10), 3, '420.00', 'transferencia', 'entregado', date(2024, 3, 12), None),
    ]

    CURSOS = [(1, 'Matemáticas'), (2, 'Historia'), (3, 'Programación')]

    ESTUDIANTES = [(1, 'Andrea', 'Mendoza'), (2, 'Diego', 'Rojas'), (3, 'Valeria', 'Castro')]

    INSCRIPCIONES = [(1, 1), (1, 3), (2, 1), (2, 2), (3, 3)]

    def add_arguments(self, parser):
        parser.add_argument('--delete', action='store_true', help='Borrar datos anteriores antes de crear nuevos')

    @transaction.atomic
    def handle(self, *args, **options):
        if options['delete']:
            # Orden inverso a las dependencias entre tablas
            EstudianteCurso.objects.all().delete()
            Estudiante.objects.all().delete()
            Curso.objects.all().delete()
            Pedido.objects.all().delete()
            Cliente.objects.all().delete()
            Pasaporte.objects.all().delete()
            Persona.objects.all().delete()
            logger.info("Datos de ejemplo anteriores eliminados")

        for id_persona, nombre, paterno, materno, id_pasaporte, numero in self.PERSONAS:
            persona, _ = Persona.objects.update_or_create(
                id_persona=id_persona,
                defaults={'nombre': nombre, 'apellido_paterno': paterno, 'apellido_materno': materno}
            )
            Pasaporte.objects.update_or_create(
                id_pasaporte=id_pasaporte,
                defaults={'numero': numero, 'id_persona': persona}
            )

        for data in self.CLIENTES:
            datos = dict(data)
            Cliente.objects.update_or_create(id_cliente=datos.pop('id_cliente'), defaults=datos)

        for id_pedido, fecha, id_cliente, total, metodo, estado, fecha_envio, observaciones in self.PEDIDOS:
            cliente = Cliente.objects.get(id_cliente=id_cliente)
            Pedido.objects.update_or_create(
                id_pedido=id_pedido,
                defaults={
                    'fecha': fecha,
                    'id_cliente': cliente,
                    'total': Decimal(total),
                    'metodo_pago': metodo,
                    'estado_pedido': estado,
                    'direccion_envio': cliente.direccion,
                    'ciudad_envio': cliente.ciudad,
                    'pais_envio': cliente.pais,
                    'fecha_envio': fecha_envio,
                    'observaciones': observaciones,
                }
            )

        for id_curso, nombre in self.CURSOS:
            Curso.objects.update_or_create(id_curso=id_curso, defaults={'nombre': nombre})

        for id_estudiante, nombre, apellido in self.ESTUDIANTES:
            Estudiante.objects.update_or_create(
                id_estudiante=id_estudiante,
                defaults={'nombre': nombre, 'apellido': apellido}
            )

        for id_estudiante, id_curso in self.INSCRIPCIONES:
            EstudianteCurso.objects.get_or_create(id_estudiante_id=id_estudiante, id_curso_id=id_curso)

        self.stdout.write(self.style.SUCCESS(
            f"Datos cargados: {Persona.objects.count()} personas, {Cliente.objects.count()} clientes, "
            f"{Pedido.objects.count()} pedidos, {Estudiante.objects.count()} estudiantes, "
            f"{Curso.objects.count()} cursos, {EstudianteCurso.objects.count()} inscripciones"
        ))
