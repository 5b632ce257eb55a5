from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Persona',
            fields=[
                ('id_persona', models.IntegerField(primary_key=True, serialize=False)),
                ('nombre', models.CharField(max_length=50)),
                ('apellido_paterno', models.CharField(max_length=50)),
                ('apellido_materno', models.CharField(max_length=50)),
            ],
            options={
                'verbose_name': 'Persona',
                'verbose_name_plural': 'Personas',
                'db_table': 'personas',
            },
        ),
        migrations.CreateModel(
            name='Pasaporte',
            fields=[
                ('id_pasaporte', models.IntegerField(primary_key=True, serialize=False)),
                ('numero', models.CharField(max_length=20)),
                ('id_persona', models.OneToOneField(db_column='id_persona', on_delete=django.db.models.deletion.PROTECT, related_name='pasaporte', to='personas.persona')),
            ],
            options={
                'verbose_name': 'Pasaporte',
                'verbose_name_plural': 'Pasaportes',
                'db_table': 'pasaportes',
            },
        ),
    ]
