from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CrimeRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('month', models.CharField(help_text='YYYY-MM', max_length=7)),
                ('municipality_code', models.CharField(help_text='KU-prefixed code, e.g. KU564', max_length=10)),
                ('municipality_name', models.CharField(max_length=100)),
                ('crime_group_code', models.CharField(max_length=20)),
                ('crime_group_name', models.CharField(max_length=200)),
                ('crime_count', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['month', 'municipality_code', 'crime_group_code'],
                'constraints': [models.UniqueConstraint(fields=('month', 'municipality_code', 'crime_group_code'), name='crime_record_month_municipality_group_uniq')],
                'indexes': [models.Index(fields=['municipality_name', 'month'], name='crime_record_name_month_idx')],
            },
        ),
    ]
