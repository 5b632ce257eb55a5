#apps/tenants/urls.py:

from django.urls import path
from . import views

urlpatterns = [
    path('debug/tenant/', views.debug_tenant_view, name='debug-tenant'),
]
