from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.CharField(editable=False, max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('gender', models.CharField(choices=[('male', 'Male'), ('female', 'Female'), ('other', 'Other')], max_length=10)),
                ('occupation', models.CharField(max_length=200)),
                ('date_of_birth', models.CharField(blank=True, max_length=40, null=True)),
                ('ssn', models.CharField(blank=True, max_length=40, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'patients',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='JournalEntry',
            fields=[
                ('id', models.CharField(editable=False, max_length=64, primary_key=True, serialize=False)),
                ('position', models.PositiveIntegerField()),
                ('type', models.CharField(choices=[('HealthCheck', 'Health check'), ('OccupationalHealthcare', 'Occupational healthcare'), ('Hospital', 'Hospital')], max_length=30)),
                ('date', models.CharField(max_length=40)),
                ('description', models.TextField()),
                ('specialist', models.CharField(max_length=200)),
                ('diagnosis_codes', models.JSONField(blank=True, default=list)),
                ('details', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('patient', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='patientor.patient')),
            ],
            options={
                'db_table': 'journal_entries',
                'ordering': ['position'],
            },
        ),
        migrations.AddConstraint(
            model_name='journalentry',
            constraint=models.UniqueConstraint(fields=('patient', 'position'), name='unique_entry_position'),
        ),
    ]
