"""Icons for menus and the application window."""

from PIL import Image, ImageDraw


def create_error_icon(size: int = 16) -> Image.Image:
    """Create the red cross shown next to saves that failed to parse."""
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    margin = size // 5
    width = max(2, size // 6)
    color = (220, 53, 69, 255)

    draw.line([(margin, margin), (size - margin - 1, size - margin - 1)], fill=color, width=width)
    draw.line([(margin, size - margin - 1), (size - margin - 1, margin)], fill=color, width=width)

    return img


def create_app_icon(size: int = 64) -> Image.Image:
    """Create a simple application icon (a floppy disk with a slot number)."""
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    margin = size // 8
    draw.rectangle(
        [margin, margin, size - margin, size - margin],
        fill=(70, 130, 180, 255),
        outline=(50, 100, 150, 255),
        width=max(1, size // 32)
    )

    # Label area (white rectangle at top)
    label_height = size // 3
    draw.rectangle(
        [margin + size // 8, margin + 2, size - margin - size // 8, margin + label_height],
        fill=(240, 240, 240, 255)
    )

    # Shutter at the bottom
    draw.rectangle(
        [size // 3, size - margin - size // 4, size - size // 3, size - margin - 2],
        fill=(200, 200, 200, 255)
    )

    return img
