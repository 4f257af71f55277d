from theme_preview.vfs.memory import FileRecord, FileSnapshot, VirtualFileSystem

__all__ = [
    "FileRecord",
    "FileSnapshot",
    "VirtualFileSystem",
]
