"""Caches of loaded resources keyed by path, plus a shader source store."""

from __future__ import annotations

import os
import weakref
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
PathLike = Union[str, "os.PathLike[str]"]


class ResourceStore(Generic[T]):
    """Loads resources on demand and shares them while they are referenced.

    ``location`` is prefixed to every fetched path; ``loader`` receives the
    prefixed path as a string. Resources that cannot be weakly referenced are
    held for the life of the store.
    """

    def __init__(self, location: PathLike, loader: Callable[[str], T],
                 copier: Callable[[T], T] | None = None) -> None:
        self.location = os.fspath(location)
        self._loader = loader
        self._copier = copier
        self._resources: dict[str, Callable[[], T | None]] = {}
        self._persistent: dict[str, T] = {}

    @staticmethod
    def _reference(resource: T) -> Callable[[], T | None]:
        try:
            return weakref.ref(resource)
        except TypeError:
            return lambda: resource

    def fetch(self, path: PathLike, copy: bool = False) -> T:
        """Return the cached resource for ``path``, loading it if needed."""
        key = self.location + os.fspath(path)
        reference = self._resources.get(key)
        resource = reference() if reference is not None else None
        if resource is None:
            resource = self._loader(key)
            self._resources[key] = self._reference(resource)

        if copy:
            if self._copier is None:
                raise TypeError("this store cannot copy its resources")
            return self._copier(resource)
        return resource

    def persist(self, path: PathLike, resource: T) -> None:
        """Keep ``resource`` alive under ``path`` for the life of the store."""
        key = os.fspath(path)
        self._resources[key] = self._reference(resource)
        self._persistent[key] = resource


class ShaderType(Enum):
    VERTEX = auto()
    GEOMETRY = auto()
    FRAGMENT = auto()


@dataclass
class ShaderSource:
    """Shader program sources read from disk."""

    vertex_path: str | None = None
    fragment_path: str | None = None
    vertex_code: str | None = None
    fragment_code: str | None = None


_CONCAT_TOKEN = "%%"
_VERTEX_TOKEN = "%V%"
_PIXEL_TOKEN = "%P%"
_TYPE_TOKEN_LENGTH = 3


class ShaderStore(ResourceStore[ShaderSource]):
    """Loads vertex and fragment shader sources, cached by path."""

    def __init__(self, location: PathLike = "Assets/Shaders/") -> None:
        super().__init__(location, self._load)

    def get(self, vertex_shader: PathLike, pixel_shader: PathLike) -> ShaderSource:
        """A program from a vertex and a fragment shader.

        Only the vertex path is prefixed with the store location.
        """
        return self.fetch(os.fspath(vertex_shader) + _CONCAT_TOKEN + os.fspath(pixel_shader))

    def get_single(self, path: PathLike, shader_type: ShaderType) -> ShaderSource:
        """A program from one vertex or fragment shader."""
        if shader_type is ShaderType.VERTEX:
            return self.fetch(os.fspath(path) + _VERTEX_TOKEN)
        if shader_type is ShaderType.FRAGMENT:
            return self.fetch(os.fspath(path) + _PIXEL_TOKEN)
        raise ValueError(f"Shader type not supported in store: {shader_type.name}")

    @staticmethod
    def _load(key: str) -> ShaderSource:
        index = key.find(_CONCAT_TOKEN)
        if index == -1:
            type_token = key[-_TYPE_TOKEN_LENGTH:]
            path = key[:-_TYPE_TOKEN_LENGTH]
            if type_token == _VERTEX_TOKEN:
                return ShaderSource(vertex_path=path, vertex_code=Path(path).read_text())
            if type_token == _PIXEL_TOKEN:
                return ShaderSource(fragment_path=path, fragment_code=Path(path).read_text())
            raise ValueError(f"Failed to load shader: {key}")

        vertex_path = key[:index]
        fragment_path = key[index + len(_CONCAT_TOKEN):]
        return ShaderSource(
            vertex_path=vertex_path,
            fragment_path=fragment_path,
            vertex_code=Path(vertex_path).read_text(),
            fragment_code=Path(fragment_path).read_text(),
        )