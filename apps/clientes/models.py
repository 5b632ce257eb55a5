#apps/clientes/models.py:

from django.db import models

class Cliente(models.Model):
    id_cliente = models.IntegerField(primary_key=True)
    nombre = models.CharField(max_length=50)
    apellido = models.CharField(max_length=50)
    correo = models.EmailField(max_length=100)
    telefono = models.CharField(max_length=20)
    direccion = models.CharField(max_length=100)
    ciudad = models.CharField(max_length=50)
    pais = models.CharField(max_length=50)
    fecha_registro = models.DateField()
    estado_cuenta = models.CharField(max_length=20)  # activo / inactivo
    tipo_cliente = models.CharField(max_length=30)  # regular / premium / vip
    
    class Meta:
        db_table = 'clientes'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        
    def __str__(self):
        return self.nombre_completo
    
    @property
    def nombre_completo(self):
        return f"{self.nombre} {self.apellido}"

class Pedido(models.Model):
    id_pedido = models.IntegerField(primary_key=True)
    fecha = models.DateField()
    id_cliente = models.ForeignKey(
        Cliente,
        on_delete=models.PROTECT,
        db_column='id_cliente',
        related_name='pedidos'
    )
    total = models.DecimalField(max_digits=10, decimal_places=2)
    metodo_pago = models.CharField(max_length=30)
    estado_pedido = models.CharField(max_length=30)
    direccion_envio = models.CharField(max_length=100)
    ciudad_envio = models.CharField(max_length=50)
    pais_envio = models.CharField(max_length=50)
    fecha_envio = models.DateField()
    observaciones = models.TextField(null=True, blank=True)
    
    class Meta:
        db_table = 'pedidos'
        verbose_name = 'Pedido'
        verbose_name_plural = 'Pedidos'
        
    def __str__(self):
        return f"Pedido {self.id_pedido} - {self.id_cliente.nombre_completo}"
