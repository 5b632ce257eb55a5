#apps/students/urls.py:

from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter()
router.register(r'estudiantes', views.EstudianteViewSet)
router.register(r'inscripciones', views.InscripcionViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
