"""Thin service layer: one service per API area over the shared executor."""

from .chat import ChatService
from .models import ModelsService
from .keys import KeysService

__all__ = ["ChatService", "ModelsService", "KeysService"]
