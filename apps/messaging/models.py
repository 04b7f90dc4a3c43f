"""Messaging domain models.

A ``Message`` is sent through the public contact form, optionally about a
specific property. When the property is known the message is delivered to
its owner; signed-in senders are linked so both sides can see the thread.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Message(models.Model):
    """Сообщение из контактной формы."""

    class Status(models.TextChoices):
        UNREAD = "unread", _("Unread")
        READ = "read", _("Read")
        REPLIED = "replied", _("Replied")

    name = models.CharField(max_length=255, help_text=_("Имя отправителя"))
    email = models.EmailField(help_text=_("Email для ответа"))
    subject = models.CharField(max_length=255)
    message = models.TextField(help_text=_("Текст сообщения"))
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.UNREAD,
    )

    property = models.ForeignKey(
        "properties.Property",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="messages",
        help_text=_("Объект недвижимости (если есть)"),
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="received_messages",
        help_text=_("Получатель, обычно владелец объекта"),
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sent_messages",
        help_text=_("Отправитель, если он вошёл в систему"),
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="message_status_idx"),
            models.Index(fields=["recipient", "-created_at"], name="message_recipient_idx"),
            models.Index(fields=["sender", "-created_at"], name="message_sender_idx"),
        ]

    def __str__(self) -> str:
        preview = self.subject[:50] + "..." if len(self.subject) > 50 else self.subject
        return f"Message {self.pk} from {self.email}: {preview}"

    def is_participant(self, user) -> bool:
        return user.is_authenticated and user.id in {self.recipient_id, self.sender_id}

    def mark_as(self, status: str) -> None:
        if self.status != status:
            self.status = status
            self.save(update_fields=["status"])
