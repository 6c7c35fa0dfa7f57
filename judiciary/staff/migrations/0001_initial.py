import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('courts', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Staff',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Timestamp when record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Timestamp when record was last modified')),
                ('name', models.CharField(max_length=100, validators=[django.core.validators.MinLengthValidator(2)])),
                ('position', models.CharField(max_length=100, validators=[django.core.validators.MinLengthValidator(2)])),
                ('court_type', models.CharField(choices=[('circuit', 'Circuit'), ('magisterial', 'Magisterial')], max_length=20)),
                ('phone', models.CharField(blank=True, default='', max_length=20)),
                ('email', models.CharField(blank=True, default='', max_length=254, validators=[django.core.validators.RegexValidator(message='Enter a valid email address', regex='^\\S+@\\S+\\.\\S+$')])),
                ('education', models.CharField(blank=True, default='', max_length=200)),
                ('department', models.CharField(blank=True, default='', max_length=100)),
                ('supervisor', models.CharField(blank=True, default='', max_length=100)),
                ('salary', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('notes', models.TextField(blank=True, default='', max_length=1000)),
                ('hire_date', models.DateField(default=django.utils.timezone.localdate)),
                ('street', models.CharField(blank=True, default='', max_length=200)),
                ('city', models.CharField(blank=True, default='', max_length=100)),
                ('state', models.CharField(blank=True, default='', max_length=100)),
                ('zip_code', models.CharField(blank=True, default='', max_length=20)),
                ('emergency_contact_name', models.CharField(blank=True, default='', max_length=100)),
                ('emergency_contact_relationship', models.CharField(blank=True, default='', max_length=50)),
                ('emergency_contact_phone', models.CharField(blank=True, default='', max_length=20)),
                ('employment_status', models.CharField(choices=[('active', 'Active'), ('retired', 'Retired'), ('dismissed', 'Dismissed'), ('on_leave', 'On Leave')], default='active', max_length=20)),
                ('retirement_date', models.DateField(blank=True, null=True)),
                ('dismissal_date', models.DateField(blank=True, null=True)),
                ('leave_start_date', models.DateField(blank=True, null=True)),
                ('leave_end_date', models.DateField(blank=True, null=True)),
                ('court', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='staff_members', to='courts.court')),
                ('created_by', models.ForeignKey(blank=True, help_text='User who created this record', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='staff_staff_created', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, help_text='User who last updated this record', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='staff_staff_updated', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Staff Member',
                'verbose_name_plural': 'Staff',
                'db_table': 'staff',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['court', 'employment_status'], name='staff_court_status_idx'), models.Index(fields=['employment_status'], name='staff_status_idx')],
            },
        ),
    ]
