"""Pytest configuration and shared fixtures."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from simple_directory_chooser.exceptions import ResourceLoadError  # noqa: E402
from simple_directory_chooser.services import IconManager, MappingResolver  # noqa: E402


class RecordingResolver(MappingResolver):
    """An in-memory resolver that records every path it was asked for."""

    def __init__(self, resources=None):
        super().__init__(resources)
        self.reads = []

    def read(self, path):
        self.reads.append(path)
        return super().read(path)

    def read_count(self, path):
        return self.reads.count(path)


class FakeImage:
    """Stand-in for a decoded, scaled image."""

    def __init__(self, data, size):
        self.data = data
        self.size = size

    def __repr__(self):
        return f"FakeImage({self.data!r}, {self.size})"


class FakeImageLoader:
    """An image loader that records calls and fails on b'corrupt' data."""

    def __init__(self):
        self.calls = []

    def load(self, data, size):
        self.calls.append((data, size))
        if data == b"corrupt":
            raise ResourceLoadError("Unsupported or corrupt image data")
        return FakeImage(data, size)


def descriptor_text(drive="drive.png", open_="open.png", closed="closed.png", icon_size="16"):
    """Build the content of an icons.props descriptor."""
    return (
        "source=Test icons\n"
        "license=CC0-1.0\n"
        f"drive={drive}\n"
        f"open={open_}\n"
        f"closed={closed}\n"
        f"icon_size={icon_size}\n"
    )


@pytest.fixture
def registry():
    """Provide the two-set registry used by most tests."""
    return {
        "available_sets": "default,dark",
        "active_set": "default",
        "location_default": "/icons/default",
        "location_dark": "/icons/dark",
    }


@pytest.fixture
def resolver():
    """Provide a resolver holding the default and dark icon sets."""
    return RecordingResolver(
        {
            "/icons/default/icons.props": descriptor_text(open_="", icon_size="16"),
            "/icons/default/drive.png": b"default-drive",
            "/icons/default/closed.png": b"default-closed",
            "/icons/dark/icons.props": descriptor_text(icon_size="32"),
            "/icons/dark/drive.png": b"dark-drive",
            "/icons/dark/open.png": b"dark-open",
            "/icons/dark/closed.png": b"dark-closed",
        }
    )


@pytest.fixture
def image_loader():
    """Provide a recording image loader."""
    return FakeImageLoader()


@pytest.fixture
def make_manager(registry, resolver, image_loader):
    """Factory fixture for IconManager instances wired to the fakes."""

    def _make(sets=None, **kwargs):
        return IconManager(
            registry if sets is None else sets,
            resolver=kwargs.pop("resolver", resolver),
            image_loader=kwargs.pop("image_loader", image_loader),
            **kwargs,
        )

    return _make


@pytest.fixture(scope="session")
def qapp():
    """Provide a QGuiApplication for tests that need Qt plugins."""
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([])
    return app


@pytest.fixture
def png_bytes():
    """Factory fixture producing PNG encoded solid-color images."""
    from PyQt6.QtCore import QBuffer, QIODevice
    from PyQt6.QtGui import QColor, QImage

    def _make(width=8, height=4, color=(255, 0, 0)):
        image = QImage(width, height, QImage.Format.Format_ARGB32)
        image.fill(QColor(*color))
        buffer = QBuffer()
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        image.save(buffer, "PNG")
        buffer.close()
        return buffer.data().data()

    return _make
