"""EmojiMask - Hide faces in photos behind emoji.

EmojiMask is a CLI tool that takes a single image, asks a face detector where
the faces are, and draws an emoji centered over each face's bounding box. The
result is written next to the input with the same pixel dimensions.

Example:
    $ emojimask photo.png

This will create photo-masked.jpg with one emoji per detected face, cycling
through a fixed palette in detection order.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
