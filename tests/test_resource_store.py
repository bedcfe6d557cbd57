import gc

import pytest

from saffron2d.resource_store import ResourceStore, ShaderSource, ShaderStore, ShaderType


class Resource:
    def __init__(self, path):
        self.path = path


class CountingLoader:
    def __init__(self):
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        return Resource(path)


def test_fetch_prefixes_location_and_caches():
    loader = CountingLoader()
    store = ResourceStore("Assets/Fonts/", loader)
    first = store.fetch("sans.ttf")
    second = store.fetch("sans.ttf")
    assert first is second
    assert loader.calls == ["Assets/Fonts/sans.ttf"]
    assert first.path == "Assets/Fonts/sans.ttf"


def test_released_resource_is_reloaded():
    loader = CountingLoader()
    store = ResourceStore("", loader)
    resource = store.fetch("a")
    del resource
    gc.collect()
    store.fetch("a")
    assert loader.calls == ["a", "a"]


def test_copy_uses_copier():
    store = ResourceStore("", CountingLoader(), copier=lambda r: Resource(r.path))
    original = store.fetch("a")
    duplicate = store.fetch("a", copy=True)
    assert duplicate is not original
    assert duplicate.path == original.path


def test_copy_without_copier_raises():
    store = ResourceStore("", CountingLoader())
    with pytest.raises(TypeError):
        store.fetch("a", copy=True)


def test_persist_keeps_resource_alive():
    loader = CountingLoader()
    store = ResourceStore("", loader)
    store.persist("kept", Resource("manual"))
    gc.collect()
    assert store.fetch("kept").path == "manual"
    assert loader.calls == []


def test_unreferenceable_resources_are_cached():
    calls = []

    def loader(path):
        calls.append(path)
        return path.upper()

    store = ResourceStore("x/", loader)
    assert store.fetch("a") == "X/A"
    assert store.fetch("a") == "X/A"
    assert calls == ["x/a"]


@pytest.fixture
def shader_dir(tmp_path):
    (tmp_path / "basic.vert").write_text("void main() { vertex }")
    (tmp_path / "basic.frag").write_text("void main() { fragment }")
    return tmp_path


def test_shader_pair(shader_dir):
    location = str(shader_dir) + "/"
    store = ShaderStore(location)
    pixel = str(shader_dir / "basic.frag")
    shader = store.get("basic.vert", pixel)
    assert shader == ShaderSource(
        vertex_path=location + "basic.vert",
        fragment_path=pixel,
        vertex_code="void main() { vertex }",
        fragment_code="void main() { fragment }",
    )
    assert store.get("basic.vert", pixel) is shader


def test_single_shaders(shader_dir):
    location = str(shader_dir) + "/"
    store = ShaderStore(location)
    vertex = store.get_single("basic.vert", ShaderType.VERTEX)
    assert vertex.vertex_code == "void main() { vertex }"
    assert vertex.fragment_code is None
    fragment = store.get_single("basic.frag", ShaderType.FRAGMENT)
    assert fragment.fragment_path == location + "basic.frag"
    assert fragment.vertex_path is None


def test_geometry_shader_unsupported(shader_dir):
    store = ShaderStore(str(shader_dir) + "/")
    with pytest.raises(ValueError):
        store.get_single("basic.vert", ShaderType.GEOMETRY)


def test_missing_shader_file(shader_dir):
    store = ShaderStore(str(shader_dir) + "/")
    with pytest.raises(FileNotFoundError):
        store.get_single("missing.vert", ShaderType.VERTEX)