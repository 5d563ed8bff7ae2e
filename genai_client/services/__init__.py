"""
Resource façades.

Each façade composes endpoint resolution, URI building, request validation
and the HTTP executor into a handful of domain operations. All operations
are async and return OperationResult.
"""

from .base import BaseService
from .moderation import ModerationService
from .run_steps import RunStepService
from .runs import RunService
from .translation import TranslationService

__all__ = [
    "BaseService",
    "RunService",
    "RunStepService",
    "ModerationService",
    "TranslationService",
]
