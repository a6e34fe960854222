# pylint: skip-file
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
import simple_history.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.CharField(max_length=255, primary_key=True, serialize=False)),
                ('email', models.CharField(blank=True, default='', max_length=255)),
                ('name', models.CharField(default='Unknown User', max_length=255)),
                ('role', models.CharField(choices=[('STUDENT', 'Student'), ('EVALUATOR', 'Evaluator'), ('ADMIN', 'Admin')], db_index=True, default='STUDENT', max_length=16)),
            ],
            options={
                'ordering': ['-created'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalUser',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('id', models.CharField(db_index=True, max_length=255)),
                ('email', models.CharField(blank=True, default='', max_length=255)),
                ('name', models.CharField(default='Unknown User', max_length=255)),
                ('role', models.CharField(choices=[('STUDENT', 'Student'), ('EVALUATOR', 'Evaluator'), ('ADMIN', 'Admin')], db_index=True, default='STUDENT', max_length=16)),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField()),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='accounts.user')),
            ],
            options={
                'verbose_name': 'historical user',
                'verbose_name_plural': 'historical users',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
