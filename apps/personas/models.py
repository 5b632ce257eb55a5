#apps/personas/models.py:

from django.db import models

class Persona(models.Model):
    id_persona = models.IntegerField(primary_key=True)
    nombre = models.CharField(max_length=50)
    apellido_paterno = models.CharField(max_length=50)
    apellido_materno = models.CharField(max_length=50)
    
    class Meta:
        db_table = 'personas'
        verbose_name = 'Persona'
        verbose_name_plural = 'Personas'
        
    def __str__(self):
        return self.nombre_completo
    
    @property
    def nombre_completo(self):
        return f"{self.nombre} {self.apellido_paterno} {self.apellido_materno}"

class Pasaporte(models.Model):
    id_pasaporte = models.IntegerField(primary_key=True)
    numero = models.CharField(max_length=20)
    # La unicidad de la llave foránea garantiza la relación uno a uno
    id_persona = models.OneToOneField(
        Persona,
        on_delete=models.PROTECT,
        db_column='id_persona',
        related_name='pasaporte'
    )
    
    class Meta:
        db_table = 'pasaportes'
        verbose_name = 'Pasaporte'
        verbose_name_plural = 'Pasaportes'
        
    def __str__(self):
        return f"{self.numero} - {self.id_persona.nombre_completo}"
