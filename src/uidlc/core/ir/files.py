"""
Generated output types for uidlc IR.

This is the only shape publishers and packagers depend on: a tree of named
folders holding files with literal text content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FileEncoding(str, Enum):
    BASE64 = "base64"
    UTF8 = "utf8"
    BINARY = "binary"


class FileLocation(str, Enum):
    REMOTE = "remote"
    PROJECT = "project"


@dataclass
class GeneratedFile:
    """A generated file. ``name`` excludes the extension carried in ``file_type``."""

    name: str
    content: str
    file_type: str | None = None
    content_encoding: FileEncoding | None = None
    location: FileLocation | None = None

    @property
    def full_name(self) -> str:
        return f"{self.name}.{self.file_type}" if self.file_type else self.name

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "content": self.content}
        if self.file_type:
            data["fileType"] = self.file_type
        if self.content_encoding:
            data["contentEncoding"] = self.content_encoding.value
        if self.location:
            data["location"] = self.location.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratedFile:
        encoding = data.get("contentEncoding")
        location = data.get("location")
        return cls(
            name=data["name"],
            content=data.get("content", ""),
            file_type=data.get("fileType"),
            content_encoding=FileEncoding(encoding) if encoding else None,
            location=FileLocation(location) if location else None,
        )


@dataclass
class GeneratedFolder:
    name: str
    files: list[GeneratedFile] = field(default_factory=list)
    sub_folders: list[GeneratedFolder] = field(default_factory=list)

    def find_file(self, name: str, file_type: str | None = None) -> GeneratedFile | None:
        """Find a file directly inside this folder."""
        for file in self.files:
            if file.name == name and (file_type is None or file.file_type == file_type):
                return file
        return None

    def find_sub_folder(self, name: str) -> GeneratedFolder | None:
        for folder in self.sub_folders:
            if folder.name == name:
                return folder
        return None

    def get_or_create_sub_folder(self, name: str) -> GeneratedFolder:
        folder = self.find_sub_folder(name)
        if folder is None:
            folder = GeneratedFolder(name=name)
            self.sub_folders.append(folder)
        return folder

    def walk(self, prefix: tuple[str, ...] = ()) -> list[tuple[tuple[str, ...], GeneratedFile]]:
        """Flatten the tree into ``(folder path, file)`` pairs, depth first."""
        entries = [(prefix, file) for file in self.files]
        for folder in self.sub_folders:
            entries.extend(folder.walk(prefix + (folder.name,)))
        return entries

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "files": [file.to_dict() for file in self.files],
            "subFolders": [folder.to_dict() for folder in self.sub_folders],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratedFolder:
        return cls(
            name=data.get("name", ""),
            files=[GeneratedFile.from_dict(f) for f in data.get("files", [])],
            sub_folders=[cls.from_dict(f) for f in data.get("subFolders", [])],
        )
