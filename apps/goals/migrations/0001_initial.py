import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('projects', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('text', models.CharField(max_length=200)),
                ('total_number', models.CharField(max_length=32)),
                ('remaining_number', models.CharField(max_length=32)),
                ('is_completed', models.BooleanField(default=False)),
                ('unit', models.CharField(choices=[('шт', 'Pieces'), ('уп', 'Packs'), ('кг', 'Kilograms'), ('л', 'Liters'), ('м', 'Meters'), ('€', 'Euro'), ('$', 'Dollar'), ('₽', 'Ruble'), ('₸', 'Tenge'), ('дн', 'Days'), ('нед', 'Weeks'), ('мес', 'Months'), ('ч', 'Hours')], default='шт', max_length=8)),
                ('scale', models.PositiveIntegerField(default=1)),
                ('order', models.PositiveIntegerField(default=0)),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='goals', to='projects.project')),
            ],
            options={
                'ordering': ['order'],
            },
        ),
    ]
