"""User domain models for HomeHarbor.

The marketplace distinguishes three roles: regular users browsing and
saving listings, agents publishing properties and answering enquiries,
and administrators running the back-office. Accounts log in by email;
the username is a public handle, and accounts created through Firebase
sign-in carry the external uid and no usable password.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.text import slugify  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """Менеджер пользователей, использующий email в качестве логина."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)

        if not extra_fields.get("username"):
            extra_fields["username"] = self.generate_unique_username(email.split("@")[0])

        phone = extra_fields.get("phone")
        if phone:
            extra_fields["phone"] = self.normalize_phone(phone)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.USER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def generate_unique_username(self, base: str) -> str:
        """Подбираем свободный username: base, base-2, base-3, ..."""
        base_username = slugify(base)[:140] or "user"
        candidate = base_username
        counter = 1
        while self.model.objects.filter(username__iexact=candidate).exists():
            counter += 1
            candidate = f"{base_username}-{counter}"
        return candidate

    @staticmethod
    def normalize_phone(phone: str) -> str:
        """Удаляем пробелы и дефисы для унификации хранения телефона."""
        return phone.replace(" ", "").replace("-", "")


class CustomUser(AbstractUser):
    """Пользователь платформы с ролью и профилем."""

    class RoleChoices(models.TextChoices):
        USER = "user", _("User")
        AGENT = "agent", _("Agent")
        ADMIN = "admin", _("Administrator")

    username = models.CharField(
        _("Username"),
        max_length=150,
        unique=True,
        help_text=_("Public handle shown next to listings and messages."),
    )
    name = models.CharField(_("Full name"), max_length=255, blank=True)
    email = models.EmailField(_("Email"), unique=True)
    phone = models.CharField(_("Phone"), max_length=32, blank=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.USER,
    )
    photo_url = models.URLField(_("Photo URL"), max_length=500, blank=True)
    firebase_uid = models.CharField(
        _("Firebase UID"),
        max_length=128,
        unique=True,
        null=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["role"], name="users_role_idx")]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    # --- Доменные помощники -------------------------------------------------
    def is_agent(self) -> bool:
        return self.role == self.RoleChoices.AGENT

    def is_platform_admin(self) -> bool:
        return self.role == self.RoleChoices.ADMIN or self.is_superuser

    def can_publish_listings(self) -> bool:
        return self.is_agent() or self.is_platform_admin() or self.is_staff

    @property
    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.username


User = CustomUser
