from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FooterContent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('section', models.CharField(help_text='quick_links, property_types, locations, social_media, ...', max_length=50)),
                ('title', models.CharField(max_length=255)),
                ('content', models.TextField(blank=True)),
                ('link', models.CharField(blank=True, max_length=500)),
                ('icon', models.CharField(blank=True, help_text='Icon class, e.g. ri-facebook-fill', max_length=100)),
                ('position', models.PositiveIntegerField(default=0)),
                ('active', models.BooleanField(default=True)),
                ('open_in_new_tab', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['section', 'position', 'id'],
                'indexes': [models.Index(fields=['section', 'position'], name='footer_section_pos_idx')],
            },
        ),
        migrations.CreateModel(
            name='PageContent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('page_type', models.CharField(help_text='agents, neighborhoods, mortgage, ...', max_length=50)),
                ('section', models.CharField(help_text='hero, features, team, faq, ...', max_length=50)),
                ('title', models.CharField(blank=True, max_length=255)),
                ('subtitle', models.CharField(blank=True, max_length=255)),
                ('content', models.TextField(blank=True)),
                ('image', models.CharField(blank=True, max_length=500)),
                ('link', models.CharField(blank=True, max_length=500)),
                ('link_text', models.CharField(blank=True, max_length=100)),
                ('button_text', models.CharField(blank=True, max_length=100)),
                ('position', models.PositiveIntegerField(default=0)),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['page_type', 'section', 'position', 'id'],
                'indexes': [models.Index(fields=['page_type', 'section', 'position'], name='page_content_type_idx')],
            },
        ),
        migrations.CreateModel(
            name='StaticPage',
            fields=[
                ('slug', models.SlugField(max_length=100, primary_key=True, serialize=False)),
                ('content', models.TextField(blank=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
