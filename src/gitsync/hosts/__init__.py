"""Concrete editor hosts."""

from gitsync.hosts.filesystem import EditorCli, FileSystemEditorHost

__all__ = ["EditorCli", "FileSystemEditorHost"]
