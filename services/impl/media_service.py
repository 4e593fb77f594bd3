"""
Media Service Implementation.

Saves images to the application album and loads images from encoded
sources. Creates the decoder, codec, writer and notifier from core layer.

Follows:
- SRP: Only handles media save/load orchestration
- DIP: Depends on core abstractions (interfaces)
"""

import time
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import numpy as np

from core.errors import DecodeError
from core.interfaces.codec_interface import IImageCodec
from core.interfaces.decoder_interface import IImageDecoder, ImageSource
from core.interfaces.writer_interface import IImageWriter, WriteStatus
from core.interfaces.notifier_interface import IMediaNotifier
from core.codec.opencv_codec import OpenCVImageCodec
from core.decoder.downsampling_decoder import DownsamplingDecoder
from core.writer.local_writer import LocalImageWriter
from core.notifier.callback_notifier import CallbackMediaNotifier
from core.storage.media_storage import (
    buildSaveFilename,
    createNewImageFile,
    getImageStorageDir,
)
from services.interfaces.media_service_interface import IMediaService
from services.interfaces.base_service_interface import BaseService, ServiceResult


class MediaService(IMediaService, BaseService):
    """
    Media Service Implementation.

    Save path: album directory -> PNG encode -> create-exclusive write
    -> media-index notification. Failures become unsuccessful results.

    Load path: delegates to the downsampling decoder and translates
    DecodeError into an unsuccessful result that keeps the error kind.
    """

    SERVICE_NAME = "media"

    def __init__(
        self,
        appName: str,
        picturesDirectory: str,
        pngCompression: int = 9,
        maxWorkers: int = 2,
        codec: Optional[IImageCodec] = None,
        decoder: Optional[IImageDecoder] = None,
        writer: Optional[IImageWriter] = None,
        notifier: Optional[IMediaNotifier] = None,
        debugBasePath: str = "output/debug",
        debugEnabled: bool = False
    ):
        """
        Initialize MediaService.

        Args:
            appName: Application name; album directory and filename prefix.
            picturesDirectory: Parent directory of the album.
            pngCompression: PNG compression level (0-9).
            maxWorkers: Worker threads for asynchronous saves.
            codec: Codec override (defaults to OpenCVImageCodec).
            decoder: Decoder override (defaults to DownsamplingDecoder over codec).
            writer: Writer override (defaults to LocalImageWriter).
            notifier: Notifier override (defaults to CallbackMediaNotifier).
            debugBasePath: Base path for debug output.
            debugEnabled: Whether to save debug output.
        """
        BaseService.__init__(
            self,
            serviceName=self.SERVICE_NAME,
            debugBasePath=debugBasePath,
            debugEnabled=debugEnabled
        )

        self._appName = appName
        self._picturesDirectory = picturesDirectory
        self._maxWorkers = max(1, maxWorkers)

        # Create core implementations
        self._codec: IImageCodec = codec if codec is not None else OpenCVImageCodec(
            pngCompression=pngCompression
        )
        self._decoder: IImageDecoder = decoder if decoder is not None else DownsamplingDecoder(
            codec=self._codec
        )
        self._writer: IImageWriter = writer if writer is not None else LocalImageWriter()
        self._notifier: IMediaNotifier = notifier if notifier is not None else CallbackMediaNotifier()

        self._executor: Optional[ThreadPoolExecutor] = None
        self._executorLock = threading.Lock()

        self._logger.info(
            f"MediaService initialized (app={appName}, pictures={picturesDirectory})"
        )

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Saving
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def saveImage(self, image: np.ndarray) -> ServiceResult:
        """Save an image to the album as PNG."""
        startTime = time.time()

        if image is None or image.size == 0:
            self._logger.warning("No image provided for saving")
            return self._failure("No image provided", startTime)

        albumDir = self.getImageStorageDir()
        if albumDir is None:
            return self._failure("Storage directory unavailable", startTime)

        try:
            encoded = self._codec.encodePng(image)
        except (ValueError, RuntimeError) as e:
            self._logger.error(f"Failed to encode image: {e}")
            return self._failure(f"Encoding failed: {e}", startTime)

        filepath = albumDir / buildSaveFilename(self._appName)
        status = self._writer.write(encoded, str(filepath))

        if status is not WriteStatus.SUCCESS:
            return self._failure(f"Image was not saved ({status.value}): {filepath}", startTime)

        self.addImageToGallery(str(filepath))

        processingTimeMs = self._measureTime(startTime)
        self._logger.info(f"Image saved: {filepath} ({processingTimeMs:.1f}ms)")

        return ServiceResult(
            success=True,
            data=filepath,
            processingTimeMs=processingTimeMs
        )

    def saveImageAsync(
        self,
        image: np.ndarray,
        onComplete: Optional[Callable[[ServiceResult], None]] = None
    ) -> "Future[ServiceResult]":
        """Save an image on a worker thread."""
        # Worker thread encodes a private copy
        snapshot = image.copy() if image is not None else None
        future = self._getExecutor().submit(self.saveImage, snapshot)

        if onComplete is not None:
            future.add_done_callback(
                lambda done: self._invokeCallback(onComplete, done)
            )

        return future

    def _invokeCallback(
        self,
        onComplete: Callable[[ServiceResult], None],
        future: "Future[ServiceResult]"
    ) -> None:
        """Deliver an asynchronous save result to the caller's callback."""
        try:
            onComplete(future.result())
        except Exception as e:
            self._logger.error(f"Save completion callback failed: {e}")

    def _getExecutor(self) -> ThreadPoolExecutor:
        """Get the worker pool, creating it on first use."""
        with self._executorLock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._maxWorkers,
                    thread_name_prefix="media-save"
                )
            return self._executor

    def shutdown(self, wait: bool = True) -> None:
        """Stop the worker pool, optionally waiting for pending saves."""
        with self._executorLock:
            executor = self._executor
            self._executor = None

        if executor is not None:
            executor.shutdown(wait=wait)
            self._logger.info("MediaService worker pool stopped")

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Loading
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def loadImage(self, source: ImageSource) -> ServiceResult:
        """Load an image at native resolution."""
        return self._load("load_full", lambda: self._decoder.loadFull(source))

    def loadImageBounded(
        self,
        source: ImageSource,
        requestedWidth: int,
        requestedHeight: int
    ) -> ServiceResult:
        """Load an image downsampled to the requested bounds."""
        return self._load(
            "load_bounded",
            lambda: self._decoder.loadBounded(source, requestedWidth, requestedHeight)
        )

    def _load(self, operation: str, loader: Callable[[], np.ndarray]) -> ServiceResult:
        """Run a decoder call and wrap the outcome in a ServiceResult."""
        startTime = time.time()

        try:
            image = loader()
        except DecodeError as e:
            self._logger.error(f"[{operation}] Failed to load image ({e.kind.value}): {e}")
            return ServiceResult(
                success=False,
                errorMessage=str(e),
                errorKind=e.kind,
                processingTimeMs=self._measureTime(startTime)
            )

        processingTimeMs = self._measureTime(startTime)
        self._logTiming(operation, processingTimeMs)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        self._saveDebugImage(timestamp, image, prefix=operation)

        return ServiceResult(
            success=True,
            data=image,
            processingTimeMs=processingTimeMs
        )

    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    # Storage and Gallery
    # ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

    def getImageStorageDir(self) -> Optional[Path]:
        """Get the album directory, creating it if needed."""
        return getImageStorageDir(self._picturesDirectory, self._appName)

    def getNewImageFile(self) -> Optional[Path]:
        """Allocate a new uniquely named image file in the album."""
        return createNewImageFile(self.getImageStorageDir())

    def addImageToGallery(self, filepath: str) -> None:
        """Notify the media index about a file."""
        self._notifier.notify(filepath)

    def _failure(self, message: str, startTime: float) -> ServiceResult:
        """Build an unsuccessful save result."""
        return ServiceResult(
            success=False,
            errorMessage=message,
            processingTimeMs=self._measureTime(startTime)
        )
