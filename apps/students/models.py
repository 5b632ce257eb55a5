#apps/students/models.py:

from django.db import models

class Estudiante(models.Model):
    id_estudiante = models.IntegerField(primary_key=True)
    nombre = models.CharField(max_length=50)
    apellido = models.CharField(max_length=50)
    cursos = models.ManyToManyField(
        'courses.Curso',
        through='EstudianteCurso',
        related_name='estudiantes',
        blank=True
    )
    
    class Meta:
        db_table = 'estudiantes'
        verbose_name = 'Estudiante'
        verbose_name_plural = 'Estudiantes'
        
    def __str__(self):
        return self.nombre_completo
    
    @property
    def nombre_completo(self):
        return f"{self.nombre} {self.apellido}"

class EstudianteCurso(models.Model):
    """Tabla intermedia: una fila por inscripción de un estudiante en un curso"""
    id_estudiante = models.ForeignKey(Estudiante, on_delete=models.CASCADE, db_column='id_estudiante')
    id_curso = models.ForeignKey('courses.Curso', on_delete=models.CASCADE, db_column='id_curso')
    
    class Meta:
        db_table = 'estudiante_curso'
        verbose_name = 'Inscripción'
        verbose_name_plural = 'Inscripciones'
        unique_together = ('id_estudiante', 'id_curso')
        
    def __str__(self):
        return f"{self.id_estudiante.nombre_completo} - {self.id_curso.nombre}"
