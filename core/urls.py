# core/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),
    
    # Entidades: /personas/, /pasaportes/, /clientes/, /pedidos/, /estudiantes/, /inscripciones/, /cursos/
    path('', include('apps.personas.urls')),
    path('', include('apps.clientes.urls')),
    path('', include('apps.students.urls')),
    path('', include('apps.courses.urls')),
    
    # Multitenancy
    path('', include('apps.posts.urls')),
    path('', include('apps.tenants.urls')),
    
    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
