"""
Media Store

Command-line entry point for the Media Store.
Loads images (optionally downsampled to fit bounds) and saves them as PNG
into the application album.

Architecture:
- ConfigService: Reads application_config.json
- MediaService: Receives parameters, creates core components internally
- main: Parses arguments and runs a single command

Examples:
  python main.py probe photo.jpg --max-width 800 --max-height 600
  python main.py save photo.jpg --max-width 800 --max-height 600
  python main.py --debug save photo.jpg
"""

import sys
import os
import argparse
import logging
from typing import List, Optional

from core.errors import DecodeError
from core.decoder.downsampling_decoder import DownsamplingDecoder
from core.decoder.sample_factor import computeSampleFactor
from services.impl.config_service import ConfigService
from services.impl.media_service import MediaService


def setupLogging(debugMode: bool = False) -> None:
    """
    Setup application logging.

    Args:
        debugMode: If True, set log level to DEBUG.
    """
    level = logging.DEBUG if debugMode else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def createMediaService(configService: ConfigService) -> MediaService:
    """
    Create the media service with parameters from config.

    Args:
        configService: Loaded configuration.

    Returns:
        MediaService: Ready-to-use service.
    """
    return MediaService(
        appName=configService.getAppName(),
        picturesDirectory=configService.getPicturesDirectory(),
        pngCompression=configService.getPngCompression(),
        maxWorkers=configService.getMaxWorkers(),
        debugBasePath=configService.getDebugBasePath(),
        debugEnabled=configService.isDebugEnabled()
    )


def parseArgs(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Load images with bounded downsampling and save them as PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="config/application_config.json",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and debug image output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, helpText in (
        ("probe", "Print native dimensions and the chosen sample factor"),
        ("save", "Load an image and save it to the application album"),
    ):
        sub = subparsers.add_parser(name, help=helpText)
        sub.add_argument("input", type=str, help="Path to the encoded image")
        sub.add_argument("--max-width", type=int, default=None, help="Requested minimum width")
        sub.add_argument("--max-height", type=int, default=None, help="Requested minimum height")

    args = parser.parse_args(argv)

    if (args.max_width is None) != (args.max_height is None):
        parser.error("--max-width and --max-height must be given together")

    return args


def runProbe(args: argparse.Namespace) -> int:
    """Print native dimensions and, with bounds, the sample factor."""
    decoder = DownsamplingDecoder()

    with open(args.input, "rb") as stream:
        native = decoder.probeDimensions(stream)

    print(f"{native.width}x{native.height}")
    if args.max_width is not None:
        sampleFactor = computeSampleFactor(native, args.max_width, args.max_height)
        print(f"sample factor: {sampleFactor}")

    return 0


def runSave(args: argparse.Namespace, mediaService: MediaService) -> int:
    """Load the input image and save it to the album."""
    logger = logging.getLogger(__name__)

    with open(args.input, "rb") as stream:
        if args.max_width is not None:
            loadResult = mediaService.loadImageBounded(stream, args.max_width, args.max_height)
        else:
            loadResult = mediaService.loadImage(stream)

    if not loadResult.success:
        logger.error(f"Failed to load {args.input}: {loadResult.errorMessage}")
        return 1

    saveResult = mediaService.saveImageAsync(loadResult.data).result()
    if not saveResult.success:
        logger.error(f"Failed to save image: {saveResult.errorMessage}")
        return 1

    print(saveResult.data)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parseArgs(argv)

    # Setup logging first
    setupLogging(debugMode=args.debug or os.environ.get("DEBUG", "").lower() == "true")
    logger = logging.getLogger(__name__)

    try:
        if args.command == "probe":
            return runProbe(args)

        configService = ConfigService(args.config)
        if args.debug:
            configService.setDebugEnabled(True)

        mediaService = createMediaService(configService)
        try:
            return runSave(args, mediaService)
        finally:
            mediaService.shutdown()

    except DecodeError as e:
        logger.error(f"Failed to decode {args.input} ({e.kind.value}): {e}")
        return 1
    except (OSError, RuntimeError) as e:
        logger.error(f"{e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
