import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('properties', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Message',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Имя отправителя', max_length=255)),
                ('email', models.EmailField(help_text='Email для ответа', max_length=254)),
                ('subject', models.CharField(max_length=255)),
                ('message', models.TextField(help_text='Текст сообщения')),
                ('status', models.CharField(choices=[('unread', 'Unread'), ('read', 'Read'), ('replied', 'Replied')], default='unread', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('property', models.ForeignKey(blank=True, help_text='Объект недвижимости (если есть)', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='messages', to='properties.property')),
                ('recipient', models.ForeignKey(blank=True, help_text='Получатель, обычно владелец объекта', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='received_messages', to=settings.AUTH_USER_MODEL)),
                ('sender', models.ForeignKey(blank=True, help_text='Отправитель, если он вошёл в систему', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sent_messages', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Message',
                'verbose_name_plural': 'Messages',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['status'], name='message_status_idx'),
                    models.Index(fields=['recipient', '-created_at'], name='message_recipient_idx'),
                    models.Index(fields=['sender', '-created_at'], name='message_sender_idx'),
                ],
            },
        ),
    ]
