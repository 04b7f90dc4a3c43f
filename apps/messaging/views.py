"""API views for contact messages."""

from __future__ import annotations

import logging

from django.db.models import Q  # type: ignore
from django.shortcuts import get_object_or_404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.properties.models import Property
from shared.pagination import PageLimitPagination
from shared.permissions import IsPlatformAdmin, is_platform_admin
from .filters import MessageFilterSet
from .models import Message
from .serializers import MessageCreateSerializer, MessageSerializer, MessageUpdateSerializer

logger = logging.getLogger(__name__)


class MessagePagination(PageLimitPagination):
    results_key = "messages"


class IsMessageParticipantOrAdmin(permissions.BasePermission):
    """Получатель, отправитель или администратор."""

    def has_permission(self, request, view):  # type: ignore
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj: Message):  # type: ignore
        return is_platform_admin(request.user) or obj.is_participant(request.user)


class MessageViewSet(viewsets.ModelViewSet):
    """
    Viewset for contact messages.

    Endpoints:
    - POST /api/v1/messages/ - отправить сообщение (доступно всем)
    - GET /api/v1/messages/ - входящие для администратора, {messages, total}
    - GET /api/v1/messages/mine/ - сообщения текущего пользователя
    - GET /api/v1/messages/property/{id}/ - сообщения по объекту
    - PUT /api/v1/messages/{id}/read/ и /replied/ - смена статуса
    """

    queryset = Message.objects.select_related("property", "recipient", "sender")
    filter_backends = [DjangoFilterBackend]
    filterset_class = MessageFilterSet
    pagination_class = MessagePagination

    def get_permissions(self):  # type: ignore
        if self.action == "create":
            return [permissions.AllowAny()]
        if self.action == "list":
            return [IsPlatformAdmin()]
        return [IsMessageParticipantOrAdmin()]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return MessageCreateSerializer
        if self.action in {"update", "partial_update"}:
            return MessageUpdateSerializer
        return MessageSerializer

    def perform_create(self, serializer):  # type: ignore
        user = self.request.user
        sender = user if user.is_authenticated else None
        message = serializer.save(sender=sender)
        logger.info(
            "Message created",
            extra={"message_id": message.id, "property_id": message.property_id},
        )

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        output = MessageSerializer(serializer.instance, context=self.get_serializer_context())
        return Response(output.data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return Response(MessageSerializer(serializer.instance).data)

    @action(detail=False, methods=["get"], url_path="mine")
    def mine(self, request):  # type: ignore
        user = request.user
        qs = self.get_queryset().filter(Q(recipient=user) | Q(sender=user))
        return Response(MessageSerializer(qs, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"property/(?P<property_id>[0-9]+)")
    def by_property(self, request, property_id=None):  # type: ignore
        property_obj = get_object_or_404(Property, pk=property_id)
        if not (is_platform_admin(request.user) or property_obj.owner_id == request.user.id):
            raise PermissionDenied("Only the property owner can read its messages.")
        qs = self.get_queryset().filter(property=property_obj)
        return Response(MessageSerializer(qs, many=True).data)

    def _change_status(self, new_status: str) -> Response:
        message = self.get_object()
        user = self.request.user
        if not (is_platform_admin(user) or message.recipient_id == user.id):
            raise PermissionDenied("Only the recipient can change the message status.")
        message.mark_as(new_status)
        return Response(MessageSerializer(message).data)

    @action(detail=True, methods=["put", "post"], url_path="read")
    def read(self, request, pk=None):  # type: ignore
        return self._change_status(Message.Status.READ)

    @action(detail=True, methods=["put", "post"], url_path="replied")
    def replied(self, request, pk=None):  # type: ignore
        return self._change_status(Message.Status.REPLIED)
