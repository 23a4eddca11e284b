"""Handlers package."""

from txgh_sync.handlers.push import PushHandler
from txgh_sync.handlers.translation_ready import TranslationReadyHandler

__all__ = ["PushHandler", "TranslationReadyHandler"]
