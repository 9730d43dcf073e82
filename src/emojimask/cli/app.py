"""CLI application entry point for emojimask.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from emojimask import __version__
from emojimask.cli.output import (
    console,
    print_detector_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from emojimask.config import (
    DetectionConfig,
    EmojiMaskSettings,
    GlyphConfig,
    LoggingConfig,
    NoFacesPolicy,
    OutputConfig,
)
from emojimask.core import FaceMasker
from emojimask.detection import CloudVisionDetector, FaceDetector, JsonFaceDetector
from emojimask.exceptions import (
    DetectionError,
    EmojiMaskError,
    ImageLoadError,
    ImageSaveError,
    RenderError,
)

# Create the Typer app
app = typer.Typer(
    name="emojimask",
    help="Hide faces in a photo behind emoji.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]EmojiMask[/bold blue] v{__version__}")
        raise typer.Exit()


def build_detector(settings: EmojiMaskSettings) -> FaceDetector:
    """Create the face detector selected by the settings.

    A faces file takes precedence over Cloud Vision.
    """
    if settings.detection.faces_file is not None:
        return JsonFaceDetector(settings.detection.faces_file)
    return CloudVisionDetector(
        key_file=settings.detection.key_file,
        max_results=settings.detection.max_results,
    )


@app.command()
def mask(
    input_image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-masked.jpg)",
        ),
    ] = None,
    faces_file: Annotated[
        Path | None,
        typer.Option(
            "--faces",
            "-f",
            help="JSON file with face polygons (skips Cloud Vision)",
        ),
    ] = None,
    key_file: Annotated[
        Path | None,
        typer.Option(
            "--key-file",
            "-k",
            help="Google Cloud service account key (default: application credentials)",
        ),
    ] = None,
    font: Annotated[
        Path | None,
        typer.Option(
            "--font",
            help="Emoji font file (default: system emoji font)",
        ),
    ] = None,
    strike_size: Annotated[
        int | None,
        typer.Option(
            "--strike-size",
            help="Native pixel size of a bitmap emoji font (default: read from font)",
            min=1,
        ),
    ] = None,
    fail_on_no_faces: Annotated[
        bool,
        typer.Option(
            "--fail-on-no-faces",
            help="Exit with an error instead of writing an unmasked copy when no faces are found",
        ),
    ] = False,
    quality: Annotated[
        int,
        typer.Option(
            "--quality",
            help="JPEG quality (1-100)",
            min=1,
            max=100,
        ),
    ] = 90,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Cover every detected face in an image with an emoji.

    Faces are detected with Google Cloud Vision (or read from --faces), and
    each one gets an emoji centered on its bounding box, sized to its width.
    The result keeps the input's pixel dimensions.

    Example:
        emojimask photo.png

    This will create photo-masked.jpg next to photo.png.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_image.exists():
        print_error(
            f"Input file not found: {input_image}",
            details=f"The file '{input_image}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_image.is_file():
        print_error(
            f"Input path is not a file: {input_image}",
            details="Please provide a path to an image file.",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = EmojiMaskSettings(
        glyph=GlyphConfig(
            font_path=font,
            strike_size=strike_size,
        ),
        detection=DetectionConfig(
            key_file=key_file,
            faces_file=faces_file,
            no_faces_policy=NoFacesPolicy.FAIL if fail_on_no_faces else NoFacesPolicy.PASSTHROUGH,
        ),
        output=OutputConfig(
            quality=quality,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        detector = build_detector(settings)
        masker = FaceMasker(settings, detector=detector, quiet=quiet)

        if not quiet:
            print_step("Masking faces")
            if verbose:
                print_detector_info(
                    type(detector).__name__,
                    settings.detection.no_faces_policy.value,
                )

        stats = masker.mask(input_image, output_path=output)

        if not quiet and stats.output_path is not None:
            print_success(
                output_path=str(stats.output_path),
                file_size=_format_file_size(stats.output_path),
                total_time_s=stats.duration_seconds,
                width=stats.image_width,
                height=stats.image_height,
                detected=stats.faces_detected,
                masked=stats.faces_masked,
                skipped=stats.faces_skipped,
            )

    except DetectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except ImageSaveError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except RenderError as e:
        print_error(f"Could not draw emoji: {e}")
        raise typer.Exit(code=1)
    except EmojiMaskError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
