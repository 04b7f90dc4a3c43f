import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Location',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, unique=True, verbose_name='Name')),
                ('city', models.CharField(max_length=100, verbose_name='City')),
                ('country', models.CharField(default='Finland', max_length=100)),
                ('image', models.URLField(blank=True, max_length=500)),
                ('description', models.TextField(blank=True)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('municipality_code', models.CharField(blank=True, help_text='Statistics Finland municipality code, e.g. 091 for Helsinki', max_length=10)),
                ('active', models.BooleanField(default=True, help_text='Show in the public list', verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated')),
            ],
            options={
                'verbose_name': 'Location',
                'verbose_name_plural': 'Locations',
                'ordering': ['city', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Property',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('slug', models.SlugField(blank=True, max_length=255, unique=True)),
                ('description', models.TextField()),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('address', models.CharField(max_length=255)),
                ('city', models.CharField(max_length=100)),
                ('postal_code', models.CharField(blank=True, max_length=20)),
                ('area', models.PositiveIntegerField(help_text='Living area in square metres.')),
                ('bedrooms', models.PositiveSmallIntegerField(default=0)),
                ('bathrooms', models.PositiveSmallIntegerField(default=0)),
                ('property_type', models.CharField(choices=[('apartment', 'Apartment'), ('house', 'House'), ('townhouse', 'Townhouse'), ('villa', 'Villa'), ('penthouse', 'Penthouse'), ('studio', 'Studio'), ('commercial', 'Commercial'), ('land', 'Land'), ('cottage', 'Cottage'), ('office', 'Office')], max_length=20)),
                ('listing_type', models.CharField(choices=[('buy', 'Buy'), ('rent', 'Rent'), ('pg', 'PG / Co-living')], max_length=10)),
                ('features', models.JSONField(blank=True, default=list)),
                ('images', models.JSONField(blank=True, default=list)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('featured', models.BooleanField(default=False)),
                ('verified', models.BooleanField(default=False)),
                ('status', models.CharField(choices=[('active', 'Active'), ('sold', 'Sold'), ('rented', 'Rented')], default='active', max_length=20)),
                ('transaction_type', models.CharField(blank=True, choices=[('new', 'New'), ('resale', 'Resale')], max_length=10)),
                ('property_ownership', models.CharField(blank=True, choices=[('freehold', 'Freehold'), ('leasehold', 'Leasehold')], max_length=10)),
                ('flooring_details', models.CharField(blank=True, max_length=255)),
                ('furnishing_details', models.CharField(blank=True, max_length=100)),
                ('heating_available', models.BooleanField(default=False)),
                ('water_details', models.CharField(blank=True, max_length=255)),
                ('gas_details', models.CharField(blank=True, max_length=255)),
                ('owner_details', models.JSONField(blank=True, default=dict)),
                ('average_nearby_prices', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('registration_details', models.CharField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='properties', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Property',
                'verbose_name_plural': 'Properties',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='property_status_idx'),
                    models.Index(fields=['city'], name='property_city_idx'),
                    models.Index(fields=['owner', 'status'], name='property_owner_status_idx'),
                ],
            },
        ),
    ]
