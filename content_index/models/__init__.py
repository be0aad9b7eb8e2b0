"""Core data models for the content index."""

from .content import ROOT_DIRECTORY, BuildWarning, ContentItem, Directory, WarningKind
from .sidebar import SidebarNode

__all__ = [
    "ROOT_DIRECTORY",
    "BuildWarning",
    "ContentItem",
    "Directory",
    "WarningKind",
    "SidebarNode",
]
