#apps/tenants/models.py:

from django.db import models
from django.contrib.auth.hashers import make_password, check_password

class Tenant(models.Model):
    """
    Organización (inquilino) identificada por su dominio.
    Los datos compartidos (usuarios, posts) se filtran por fila con tenant_id.
    """
    name = models.CharField(max_length=255)
    domain = models.CharField(max_length=255, unique=True)
    database = models.CharField(max_length=255, null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'tenants'
        verbose_name = 'Tenant'
        verbose_name_plural = 'Tenants'
        
    def __str__(self):
        return f"{self.name} ({self.domain})"
    
    @classmethod
    def for_host(cls, host):
        """Busca el tenant cuyo dominio coincide con el host sin distinguir mayúsculas; None si no existe"""
        return cls.objects.filter(domain__iexact=host).first()

class User(models.Model):
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)
    password = models.CharField(max_length=128)
    tenant = models.ForeignKey(Tenant, on_delete=models.CASCADE, related_name='users')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'users'
        verbose_name = 'Usuario'
        verbose_name_plural = 'Usuarios'
        
    def __str__(self):
        return self.email
    
    def set_password(self, raw_password):
        self.password = make_password(raw_password)
    
    def check_password(self, raw_password):
        return check_password(raw_password, self.password)
