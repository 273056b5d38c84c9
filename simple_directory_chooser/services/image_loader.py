"""Qt based decoding and scaling of icon images."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage

from simple_directory_chooser.exceptions import ResourceLoadError


class QtImageLoader:
    """Decode icon bytes into a square QImage.

    QImage works without a running QApplication, so icons can be prepared
    before the tree widget exists. SVG input needs Qt's svg image format
    plugin, which the PyQt6 wheels ship.
    """

    def __init__(self, smooth: bool = True):
        """Initialize the loader.

        Args:
            smooth: Use smooth (bilinear) scaling instead of nearest neighbour
        """
        self._mode = (
            Qt.TransformationMode.SmoothTransformation
            if smooth
            else Qt.TransformationMode.FastTransformation
        )

    def load(self, data: bytes, size: int) -> QImage:
        """Decode the image and scale it to size x size pixels.

        Raises:
            ResourceLoadError: If the data is not a decodable image or size is invalid
        """
        if size <= 0:
            raise ResourceLoadError(f"Invalid icon size: {size}")

        image = QImage.fromData(data)
        if image.isNull():
            raise ResourceLoadError("Unsupported or corrupt image data")

        return image.scaled(
            size,
            size,
            Qt.AspectRatioMode.IgnoreAspectRatio,
            self._mode,
        )
