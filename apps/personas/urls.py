#apps/personas/urls.py:

from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter()
router.register(r'personas', views.PersonaViewSet)
router.register(r'pasaportes', views.PasaporteViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
