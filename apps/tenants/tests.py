"""
Tests de resolución de tenant.

Cubre:
- TenantMiddleware (host -> request.tenant)
- Endpoint de diagnóstico /debug/tenant/
- Comando seed_tenants
"""
import importlib
import os
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.http import HttpResponse
from django.test import SimpleTestCase, TestCase, RequestFactory, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from apps.posts.models import Post
from .middleware import TenantMiddleware
from .models import Tenant, User


class TenantMiddlewareTest(TestCase):

    def setUp(self):
        self.factory = RequestFactory()
        self.tenant = Tenant.objects.create(name='Empresa A', domain='empresa-a.test')
        self.middleware = TenantMiddleware(lambda request: HttpResponse('ok'))

    def test_resolves_tenant_by_domain(self):
        request = self.factory.get('/posts/', HTTP_HOST='empresa-a.test')
        self.middleware(request)

        self.assertEqual(request.tenant, self.tenant)
        self.assertEqual(request.tenant_host, 'empresa-a.test')

    def test_strips_port_and_case(self):
        request = self.factory.get('/posts/', HTTP_HOST='Empresa-A.test:8000')
        self.middleware(request)

        self.assertEqual(request.tenant, self.tenant)

    def test_matches_domain_stored_with_capitals(self):
        tenant = Tenant.objects.create(name='Empresa X', domain='Empresa-X.test')
        request = self.factory.get('/posts/', HTTP_HOST='Empresa-X.test')
        self.middleware(request)

        self.assertEqual(request.tenant, tenant)

    def test_ipv6_host_keeps_brackets(self):
        request = self.factory.get('/posts/', HTTP_HOST='[::1]:8000')
        self.middleware(request)

        self.assertEqual(request.tenant_host, '[::1]')
        self.assertIsNone(request.tenant)

    def test_unknown_host_leaves_no_tenant(self):
        request = self.factory.get('/posts/', HTTP_HOST='otra.test')
        self.middleware(request)

        self.assertIsNone(request.tenant)

    def test_tenant_is_bound_to_each_request(self):
        Tenant.objects.create(name='Empresa B', domain='empresa-b.test')
        request_a = self.factory.get('/posts/', HTTP_HOST='empresa-a.test')
        request_b = self.factory.get('/posts/', HTTP_HOST='empresa-b.test')

        self.middleware(request_a)
        self.middleware(request_b)

        self.assertEqual(request_a.tenant.domain, 'empresa-a.test')
        self.assertEqual(request_b.tenant.domain, 'empresa-b.test')


class TenantModelTest(TestCase):

    def test_user_password_is_hashed(self):
        tenant = Tenant.objects.create(name='Empresa A', domain='empresa-a.test')
        user = User(name='Usuario', email='usuario@empresa-a.test', tenant=tenant)
        user.set_password('password')
        user.save()

        self.assertNotEqual(user.password, 'password')
        self.assertTrue(user.check_password('password'))
        self.assertFalse(user.check_password('otra'))


class DebugTenantViewTest(APITestCase):

    def setUp(self):
        self.tenant = Tenant.objects.create(name='Empresa A', domain='empresa-a.test')
        user = User.objects.create(name='Usuario', email='usuario@empresa-a.test', password='x', tenant=self.tenant)
        Post.objects.create(title='Post A', content='...', user=user, tenant=self.tenant)

    @override_settings(DEBUG=False)
    def test_hidden_without_debug(self):
        response = self.client.get('/debug/tenant/', HTTP_HOST='empresa-a.test')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    @override_settings(DEBUG=True)
    def test_reports_resolution_state(self):
        response = self.client.get('/debug/tenant/', HTTP_HOST='empresa-a.test')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        info = response.data['debug_info']
        self.assertEqual(info['request_host'], 'empresa-a.test')
        self.assertEqual(info['current_tenant']['id'], self.tenant.id)
        self.assertTrue(info['are_tenants_equal'])
        query = response.data['query_analysis']
        self.assertEqual(query['posts_count_with_scope'], 1)
        self.assertEqual(query['posts_with_scope_tenant_ids'], [self.tenant.id])
        self.assertIn('posts', query['sql_query_generated'])

    @override_settings(DEBUG=True, TENANT_UNSCOPED_FALLBACK=False)
    def test_reports_unresolved_host(self):
        response = self.client.get('/debug/tenant/', HTTP_HOST='otra.test')

        self.assertIsNone(response.data['debug_info']['current_tenant'])
        self.assertEqual(response.data['query_analysis']['posts_count_with_scope'], 0)
        self.assertEqual(response.data['query_analysis']['posts_count_without_scope'], 1)
        self.assertIsNone(response.data['query_analysis']['sql_query_generated'])


class DebugSettingDefaultTest(SimpleTestCase):

    def tearDown(self):
        import core.settings
        importlib.reload(core.settings)

    def test_debug_is_off_unless_enabled(self):
        import core.settings
        entorno = {k: v for k, v in os.environ.items() if k != 'DJANGO_DEBUG'}
        with mock.patch.dict(os.environ, entorno, clear=True):
            importlib.reload(core.settings)
            self.assertFalse(core.settings.DEBUG)

        with mock.patch.dict(os.environ, {'DJANGO_DEBUG': 'true'}):
            importlib.reload(core.settings)
            self.assertTrue(core.settings.DEBUG)


class SeedTenantsCommandTest(TestCase):

    def test_creates_two_tenants_with_user_and_post(self):
        call_command('seed_tenants', stdout=StringIO())

        self.assertEqual(
            sorted(Tenant.objects.values_list('domain', flat=True)),
            ['empresa-a.test', 'empresa-b.test']
        )
        self.assertEqual(User.objects.count(), 2)
        self.assertEqual(Post.objects.count(), 2)
        for post in Post.objects.select_related('user'):
            self.assertEqual(post.user.tenant_id, post.tenant_id)

    def test_is_idempotent(self):
        call_command('seed_tenants', stdout=StringIO())
        call_command('seed_tenants', stdout=StringIO())

        self.assertEqual(Tenant.objects.count(), 2)
        self.assertEqual(Post.objects.count(), 2)
