"""Generate the window icon (calendar page with a day number, PIL Image in memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(day: int | None = None, size: int = 64) -> Image.Image:
    """Return a size×size RGBA calendar page: accent header band, day number below."""
    if day is None:
        day = date.today().day
    if not 1 <= day <= 31:
        raise ValueError(f"day must be in 1..31, got {day}")

    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    band = size // 4
    draw.rectangle((0, 0, size - 1, size - 1), fill="white", outline="#333333")
    draw.rectangle((0, 0, size - 1, band), fill=ACCENT)

    text = str(day)
    body = size - band
    # Largest font that fits the area under the header band
    font_size = body
    font = None
    while font_size > 6:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 4 and bbox[3] - bbox[1] <= body - 4:
            break
        font_size -= 1

    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = band + (body - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
