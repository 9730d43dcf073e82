"""Output path derivation.

Converts: photo.png       -> photo-masked.jpg
          archive.tar.gz  -> archive-masked.jpg
          README          -> README-masked.jpg
          .hidden.png     -> .hidden-masked.jpg
          albums.v2/a.png -> albums.v2/a-masked.jpg
"""

from pathlib import Path


def masked_path(source_path: Path, suffix: str = "-masked", extension: str = "jpg") -> Path:
    """Derive the output path for a masked image.

    The base name is the file name up to its first ``.``; everything after it
    is dropped. A leading ``.`` belongs to the base name, so ``.hidden.png``
    keeps ``.hidden``. Dots in parent directories are left alone.

    Args:
        source_path: Input image path
        suffix: Marker appended to the base name
        extension: Output extension, without the dot

    Returns:
        Path beside the input named ``<base><suffix>.<extension>``
    """
    name = source_path.name
    prefix = "." if name.startswith(".") else ""
    base = prefix + name[len(prefix) :].split(".", 1)[0]
    return source_path.parent / f"{base}{suffix}.{extension}"
