import logging
from django.core.management.base import BaseCommand
from django.db import transaction
from apps.posts.models import Post
from apps.tenants.models import Tenant, User

logger = logging.getLogger(__name__)

class Command(BaseCommand):
    help = 'Crea los tenants de ejemplo (Empresa A y Empresa B) con un usuario y un post cada uno'

    TENANTS = [
        {
            'name': 'Empresa A',
            'domain': 'empresa-a.test',
            'user': {'name': 'Usuario Empresa A', 'email': 'usuario@empresa-a.test'},
            'post': {
                'title': 'Primer post Empresa A',
                'content': 'Este es el contenido del primer post de la Empresa A. Solo visible para tenant 1.',
            },
        },
        {
            'name': 'Empresa B',
            'domain': 'empresa-b.test',
            'user': {'name': 'Usuario Empresa B', 'email': 'usuario@empresa-b.test'},
            'post': {
                'title': 'Primer post Empresa B',
                'content': 'Este es el contenido del primer post de la Empresa B. Solo visible para tenant 2.',
            },
        },
    ]

    def add_arguments(self, parser):
        parser.add_argument('--flush', action='store_true', help='Borrar posts, usuarios y tenants antes de crear')
        parser.add_argument('--password', default='password', help='Contraseña de los usuarios de ejemplo')

    @transaction.atomic
    def handle(self, *args, **options):
        if options['flush']:
            Post.objects.all().delete()
            User.objects.all().delete()
            Tenant.objects.all().delete()
            logger.info("Posts, usuarios y tenants eliminados")

        for data in self.TENANTS:
            tenant, created = Tenant.objects.get_or_create(
                domain=data['domain'],
                defaults={'name': data['name'], 'is_active': True}
            )

            user = User.objects.filter(email=data['user']['email']).first()
            if user is None:
                user = User(tenant=tenant, **data['user'])
                user.set_password(options['password'])
                user.save()

            Post.objects.get_or_create(
                title=data['post']['title'],
                tenant=tenant,
                defaults={'content': data['post']['content'], 'user': user}
            )

            estado = 'creado' if created else 'existente'
            self.stdout.write(f"Tenant {tenant.name} ({tenant.domain}) {estado}")

        self.stdout.write(self.style.SUCCESS('Tenants creados exitosamente'))
