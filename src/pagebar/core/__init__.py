"""Core pagination logic, independent of any bot framework."""

from pagebar.core.container import PaginationContainer, paginate, render
from pagebar.core.entries import (
    Activation,
    ActivationEffect,
    EntryDescriptor,
    EntryRole,
    PaginationEntry,
    default_label_and_title,
)
from pagebar.core.sequence import ELLIPSIS, SequenceConfig, Token, generate, generate_for

__all__ = [
    "ELLIPSIS",
    "Token",
    "SequenceConfig",
    "generate",
    "generate_for",
    "Activation",
    "ActivationEffect",
    "EntryDescriptor",
    "EntryRole",
    "PaginationEntry",
    "default_label_and_title",
    "PaginationContainer",
    "paginate",
    "render",
]
