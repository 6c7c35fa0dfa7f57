import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Court',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('is_active', models.BooleanField(default=True, help_text='Set to False instead of deleting.')),
                ('name', models.CharField(max_length=100, validators=[django.core.validators.MinLengthValidator(2)])),
                ('type', models.CharField(choices=[('circuit', 'Circuit'), ('magisterial', 'Magisterial')], default='magisterial', max_length=20)),
                ('location', models.CharField(blank=True, default='', max_length=200)),
                ('description', models.CharField(blank=True, default='', max_length=500)),
                ('street', models.CharField(blank=True, default='', max_length=200)),
                ('city', models.CharField(blank=True, default='', max_length=100)),
                ('state', models.CharField(blank=True, default='', max_length=100)),
                ('zip_code', models.CharField(blank=True, default='', max_length=20)),
                ('phone', models.CharField(blank=True, default='', max_length=20)),
                ('email', models.EmailField(blank=True, default='', max_length=254)),
                ('fax', models.CharField(blank=True, default='', max_length=20)),
                ('circuit_court', models.ForeignKey(blank=True, help_text='Parent circuit court (magisterial courts only)', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='magisterial_courts', to='courts.court')),
            ],
            options={
                'verbose_name': 'Court',
                'verbose_name_plural': 'Courts',
                'db_table': 'courts',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['type', 'is_active'], name='courts_type_active_idx')],
            },
        ),
    ]
