"""Test MediaService save/load orchestration."""

import io
import threading

import cv2
import numpy as np
import pytest

from core.errors import DecodeErrorKind
from core.notifier.callback_notifier import CallbackMediaNotifier
from services.impl import media_service as media_service_module
from services.impl.media_service import MediaService


@pytest.fixture
def picturesRoot(tmp_path):
    root = tmp_path / "Pictures"
    root.mkdir()
    return root


@pytest.fixture
def indexed():
    return []


@pytest.fixture
def service(picturesRoot, indexed, tmp_path):
    mediaService = MediaService(
        appName="PxSort",
        picturesDirectory=str(picturesRoot),
        notifier=CallbackMediaNotifier([indexed.append]),
        debugBasePath=str(tmp_path / "debug"),
    )
    yield mediaService
    mediaService.shutdown()


def sampleImage():
    rng = np.random.default_rng(seed=3)
    return rng.integers(0, 256, size=(24, 40, 3), dtype=np.uint8)


def test_save_image_writes_png_and_notifies(service, picturesRoot, indexed):
    """A saved image lands in the album, round-trips losslessly and is indexed."""
    image = sampleImage()

    result = service.saveImage(image)

    assert result.success, result.errorMessage
    savedPath = result.data
    assert savedPath.parent == picturesRoot / "PxSort"
    assert savedPath.name.startswith("PXSORT_")
    assert savedPath.suffix == ".png"
    np.testing.assert_array_equal(cv2.imread(str(savedPath), cv2.IMREAD_COLOR), image)
    assert indexed == [str(savedPath)]


def test_save_collision_is_reported(service, monkeypatch, indexed):
    """Saving twice to the same name fails the second time without indexing."""
    monkeypatch.setattr(
        media_service_module, "buildSaveFilename", lambda appName: "PXSORT_fixed.png"
    )

    first = service.saveImage(sampleImage())
    second = service.saveImage(sampleImage())

    assert first.success
    assert not second.success
    assert "already_exists" in second.errorMessage
    assert len(indexed) == 1


def test_save_without_storage_directory(tmp_path, indexed):
    """A missing pictures root makes the save fail cleanly."""
    mediaService = MediaService(
        appName="PxSort",
        picturesDirectory=str(tmp_path / "missing"),
        notifier=CallbackMediaNotifier([indexed.append]),
    )

    result = mediaService.saveImage(sampleImage())

    assert not result.success
    assert result.errorMessage == "Storage directory unavailable"
    assert indexed == []


def test_save_empty_image(service):
    """Empty or missing images are rejected."""
    assert not service.saveImage(None).success
    assert not service.saveImage(np.zeros((0, 0, 3), dtype=np.uint8)).success


def test_save_image_async(service, indexed):
    """Asynchronous saves resolve a future and call the completion callback."""
    done = threading.Event()
    delivered = []

    def onComplete(result):
        delivered.append(result)
        done.set()

    image = sampleImage()
    future = service.saveImageAsync(image, onComplete=onComplete)
    # Caller edits after submission must not affect the saved file
    image[:] = 0

    result = future.result(timeout=10)
    assert done.wait(timeout=10)

    assert result.success
    assert delivered == [result]
    np.testing.assert_array_equal(
        cv2.imread(str(result.data), cv2.IMREAD_COLOR), sampleImage()
    )
    assert indexed == [str(result.data)]


def test_async_callback_failure_is_contained(service):
    """A raising completion callback does not break the future."""
    def onComplete(result):
        raise RuntimeError("ui gone")

    future = service.saveImageAsync(sampleImage(), onComplete=onComplete)

    assert future.result(timeout=10).success


def test_load_image_bounded(service, makeImageBytes):
    """Bounded loads return the downsampled image."""
    result = service.loadImageBounded(io.BytesIO(makeImageBytes(2000, 2000)), 400, 400)

    assert result.success
    assert result.data.shape[:2] == (500, 500)
    assert result.errorKind is None


def test_load_image_full(service, makeImageBytes):
    """Full loads keep native size."""
    result = service.loadImage(makeImageBytes(123, 45))

    assert result.success
    assert result.data.shape[:2] == (45, 123)


def test_load_failures_keep_error_kind(service):
    """Decode errors become failed results that keep the error kind."""
    malformed = service.loadImage(b"definitely not an image")
    badBounds = service.loadImageBounded(b"irrelevant", 0, 100)

    assert not malformed.success
    assert malformed.data is None
    assert malformed.errorKind is DecodeErrorKind.INVALID_FORMAT
    assert badBounds.errorKind is DecodeErrorKind.INVALID_ARGUMENT


def test_debug_mode_saves_decoded_image(service, makeImageBytes, tmp_path):
    """With debug enabled, decoded images are written to the debug folder."""
    service.setDebugEnabled(True)

    result = service.loadImage(makeImageBytes(16, 16))

    assert result.success
    debugFiles = list((tmp_path / "debug" / "media").glob("load_full_*.png"))
    assert len(debugFiles) == 1


def test_new_image_file_in_album(service, picturesRoot):
    """Capture files are allocated inside the album."""
    path = service.getNewImageFile()

    assert path is not None
    assert path.parent == picturesRoot / "PxSort"
    assert path.name.startswith("IMG_")
