"""
Tests del listado de posts por tenant.

El tenant se resuelve por el host de la petición (TenantMiddleware) y se pasa
explícitamente al servicio posts_for_tenant.
"""
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from apps.tenants.models import Tenant, User
from .models import Post
from .services import posts_for_tenant


class TenantPostsMixin:

    def crear_tenant(self, name, domain):
        tenant = Tenant.objects.create(name=name, domain=domain)
        user = User(name=f'Usuario {name}', email=f'usuario@{domain}', tenant=tenant)
        user.set_password('password')
        user.save()
        return tenant, user

    def setUp(self):
        self.tenant_a, self.user_a = self.crear_tenant('Empresa A', 'empresa-a.test')
        self.tenant_b, self.user_b = self.crear_tenant('Empresa B', 'empresa-b.test')
        self.post_a1 = Post.objects.create(title='Post A1', content='...', user=self.user_a, tenant=self.tenant_a)
        self.post_a2 = Post.objects.create(title='Post A2', content='...', user=self.user_a, tenant=self.tenant_a)
        self.post_b = Post.objects.create(title='Post B', content='...', user=self.user_b, tenant=self.tenant_b)


class PostsForTenantServiceTest(TenantPostsMixin, TestCase):

    def test_scopes_to_tenant_newest_first(self):
        posts = list(posts_for_tenant(self.tenant_a))
        self.assertEqual(posts, [self.post_a2, self.post_a1])

    def test_without_tenant_returns_nothing(self):
        self.assertEqual(list(posts_for_tenant(None)), [])

    def test_without_tenant_and_unscoped_fallback_returns_all(self):
        with self.assertLogs('apps.posts.services', level='WARNING'):
            posts = list(posts_for_tenant(None, allow_unscoped=True))
        self.assertEqual(len(posts), 3)


class PostListAPITest(TenantPostsMixin, APITestCase):
    """Endpoint /posts/"""

    def test_lists_only_posts_of_host_tenant(self):
        response = self.client.get('/posts/', HTTP_HOST='empresa-a.test')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p['title'] for p in response.data['posts']], ['Post A2', 'Post A1'])
        self.assertTrue(all(p['tenant']['id'] == self.tenant_a.id for p in response.data['posts']))
        self.assertEqual(response.data['currentTenant']['domain'], 'empresa-a.test')

    def test_host_port_is_ignored(self):
        response = self.client.get('/posts/', HTTP_HOST='empresa-b.test:8000')

        self.assertEqual([p['title'] for p in response.data['posts']], ['Post B'])
        self.assertEqual(response.data['currentTenant']['name'], 'Empresa B')

    def test_domain_with_capitals_is_resolved(self):
        tenant_x, user_x = self.crear_tenant('Empresa X', 'Empresa-X.test')
        Post.objects.create(title='Post X', content='...', user=user_x, tenant=tenant_x)

        response = self.client.get('/posts/', HTTP_HOST='Empresa-X.test')

        self.assertEqual([p['title'] for p in response.data['posts']], ['Post X'])
        self.assertEqual(response.data['currentTenant']['id'], tenant_x.id)

    def test_posts_include_user_without_password(self):
        response = self.client.get('/posts/', HTTP_HOST='empresa-b.test')

        user = response.data['posts'][0]['user']
        self.assertEqual(user['email'], 'usuario@empresa-b.test')
        self.assertNotIn('password', user)

    @override_settings(TENANT_UNSCOPED_FALLBACK=False)
    def test_unknown_host_lists_no_posts(self):
        response = self.client.get('/posts/', HTTP_HOST='desconocido.test')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['posts'], [])
        self.assertIsNone(response.data['currentTenant'])

    @override_settings(TENANT_UNSCOPED_FALLBACK=True)
    def test_unknown_host_with_fallback_lists_all_posts(self):
        response = self.client.get('/posts/', HTTP_HOST='desconocido.test')

        self.assertEqual(len(response.data['posts']), 3)
        self.assertIsNone(response.data['currentTenant'])
