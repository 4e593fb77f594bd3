"""Shared fixtures for Media Store tests."""

import io
import sys
import json
from pathlib import Path

import cv2
import numpy as np
import pytest
from PIL import Image

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def encodeSolidImage(width, height, color=(0, 128, 255), ext=".png"):
    """Encode a solid-colour BGR image of the given size."""
    image = np.empty((height, width, 3), dtype=np.uint8)
    image[:, :] = color
    success, encoded = cv2.imencode(ext, image)
    assert success, f"Failed to encode {width}x{height}{ext}"
    return encoded.tobytes()


def encodeOrientedJpeg(width, height, orientation=6):
    """Encode a JPEG stored as width x height with an EXIF orientation tag."""
    exif = Image.Exif()
    exif[0x0112] = orientation

    buffer = io.BytesIO()
    Image.new("RGB", (width, height), (30, 60, 200)).save(
        buffer, format="JPEG", exif=exif.tobytes()
    )
    return buffer.getvalue()


@pytest.fixture
def makeImageBytes():
    """Factory fixture producing encoded solid-colour images."""
    return encodeSolidImage


@pytest.fixture
def makeOrientedJpeg():
    """Factory fixture producing EXIF-rotated JPEGs."""
    return encodeOrientedJpeg


@pytest.fixture
def configFile(tmp_path):
    """Write an application config pointing at a temporary pictures root."""
    picturesRoot = tmp_path / "Pictures"
    picturesRoot.mkdir()

    config = {
        "app": {"name": "PxSort"},
        "storage": {"picturesDirectory": str(picturesRoot), "pngCompression": 6},
        "worker": {"maxWorkers": 3},
        "debug": {"enabled": False, "basePath": str(tmp_path / "debug")},
    }
    path = tmp_path / "application_config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path
