#apps/courses/models.py:
from django.db import models

class Curso(models.Model):
    id_curso = models.IntegerField(primary_key=True)
    nombre = models.CharField(max_length=50)
    
    class Meta:
        db_table = 'cursos'
        verbose_name = 'Curso'
        verbose_name_plural = 'Cursos'
        
    def __str__(self):
        return self.nombre
