"""An in-memory 32-bit framebuffer with simple drawing primitives and a vector font."""

from __future__ import annotations

from math import isqrt

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
SCREEN_DEPTH = 32

Segment = tuple[int, int, int, int]

_FONT: dict[str, tuple[Segment, ...]] = {
    "A": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 0, 10, 20), (10, 10, 0, 10), (0, 10, 0, 20)),
    "B": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 0, 10, 20), (10, 10, 0, 10), (0, 10, 0, 20),
          (10, 20, 0, 20)),
    "C": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 20, 0, 20)),
    "D": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 0, 10, 20), (10, 20, 0, 20), (10, 20, 0, 20)),
    "E": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 20, 0, 20), (0, 10, 10, 10)),
    "F": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 10, 0, 10)),
    "G": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 20, 0, 20), (10, 10, 5, 10), (10, 20, 10, 20),
          (10, 20, 10, 10)),
    "H": ((0, 0, 0, 20), (10, 0, 10, 20), (10, 10, 0, 10)),
    "I": ((5, 0, 5, 20), (0, 0, 10, 0), (10, 20, 0, 20)),
    "J": ((10, 0, 10, 20), (0, 0, 10, 0), (10, 20, 0, 20), (0, 20, 0, 10)),
    "K": ((0, 0, 0, 20), (0, 10, 10, 0), (10, 20, 0, 10)),
    "L": ((0, 0, 0, 20), (0, 20, 10, 20)),
    "M": ((0, 0, 0, 20), (0, 0, 5, 10), (10, 0, 5, 10), (10, 0, 10, 20)),
    "N": ((0, 0, 0, 20), (0, 0, 10, 20), (10, 0, 10, 20)),
    "O": ((0, 0, 0, 20), (10, 0, 10, 20), (0, 20, 10, 20), (0, 0, 10, 0)),
    "P": ((0, 0, 0, 20), (0, 0, 10, 0), (10, 0, 10, 10), (10, 10, 0, 10)),
    "Q": ((0, 0, 0, 20), (10, 0, 10, 20), (0, 20, 10, 20), (0, 0, 10, 0), (5, 15, 10, 20)),
    "R": ((0, 20, 0, 0), (0, 0, 10, 0), (10, 0, 10, 10), (10, 10, 0, 10), (0, 10, 5, 15),
          (5, 15, 10, 20)),
    "S": ((0, 20, 10, 20), (10, 20, 10, 10), (10, 10, 0, 10), (0, 10, 0, 0), (0, 0, 10, 0)),
    "T": ((0, 0, 10, 0), (5, 0, 5, 10), (5, 10, 5, 20)),
    "U": ((0, 0, 0, 20), (10, 0, 10, 20), (0, 20, 10, 20)),
    "V": ((0, 0, 5, 20), (10, 0, 5, 20)),
    "W": ((0, 0, 0, 20), (0, 20, 5, 10), (10, 20, 5, 10), (10, 20, 10, 0)),
    "X": ((0, 0, 5, 10), (5, 10, 10, 20), (0, 20, 5, 10), (5, 10, 10, 0)),
    "Y": ((0, 0, 5, 10), (10, 0, 5, 10), (5, 10, 5, 20)),
    "Z": ((0, 0, 10, 0), (10, 0, 0, 20), (0, 20, 10, 20)),
}


def swap_red_blue(color: int) -> int:
    """Exchange the red and blue bytes of a 0xRRGGBB colour, dropping anything above."""
    r = (color >> 16) & 0xFF
    g = (color >> 8) & 0xFF
    b = color & 0xFF
    return (b << 16) | (g << 8) | r


def glyph(letter: str) -> tuple[Segment, ...]:
    """Line segments of a letter on a 10x20 grid; empty for characters without a glyph."""
    return _FONT.get(letter, ())


class Screen:
    """A framebuffer whose words are laid out as 0x00BBGGRR."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.depth = SCREEN_DEPTH
        self.pitch = width * (SCREEN_DEPTH // 8)
        self._pixels = [0] * (width * height)

    def pixel(self, x: int, y: int) -> int:
        """Return the framebuffer word stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self._pixels[y * self.width + x]

    def clear(self, color: int) -> None:
        """Write the colour word unchanged to every pixel."""
        self._pixels[:] = [color & 0xFFFFFFFF] * (self.width * self.height)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points off screen are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y * self.width + x] = swap_red_blue(color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a rectangle, clipped to the screen."""
        left, right = max(x, 0), min(x + w, self.width)
        top, bottom = max(y, 0), min(y + h, self.height)
        if left >= right or top >= bottom:
            return
        span = [swap_red_blue(color)] * (right - left)
        for row in range(top, bottom):
            start = row * self.width
            self._pixels[start + left:start + right] = span

    def draw_empty_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Draw a one-pixel rectangle outline."""
        self.draw_line(x, y, x + w - 1, y, color, 1)
        self.draw_line(x, y + h - 1, x + w - 1, y + h - 1, color, 1)
        self.draw_line(x, y, x, y + h - 1, color, 1)
        self.draw_line(x + w - 1, y, x + w - 1, y + h - 1, color, 1)

    def draw_circle(self, x0: int, y0: int, radius: int, color: int) -> None:
        """Fill every point within radius of (x0, y0)."""
        for dy in range(-radius, radius + 1):
            reach = isqrt(radius * radius - dy * dy)
            self.draw_rect(x0 - reach, y0 + dy, 2 * reach + 1, 1, color)

    def draw_line(
        self, x0: int, y0: int, x1: int, y1: int, color: int, thickness: int
    ) -> None:
        """Draw a Bresenham line, stamping a thickness-sized square at each step."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.draw_rect(x0, y0, thickness, thickness, color)
            if x0 == x1 and y0 == y1:
                break
            err2 = err * 2
            if err2 > -dy:
                err -= dy
                x0 += sx
            if err2 < dx:
                err += dx
                y0 += sy

    def draw_rounded_rect(
        self, x: int, y: int, w: int, h: int, r: int, color: int
    ) -> None:
        """Fill a rectangle whose corners are rounded with radius r."""
        self.draw_rect(x + r, y, w - 2 * r, h, color)
        self.draw_rect(x, y + r, w, h - 2 * r, color)
        self.draw_circle(x + r, y + r, r, color)
        self.draw_circle(x + w - r, y + r, r, color)
        self.draw_circle(x + r, y + h - r, r, color)
        self.draw_circle(x + w - r, y + h - r, r, color)

    def draw_letter(
        self, x: int, y: int, letter: str, color: int, font_size: int, bold: bool
    ) -> None:
        """Draw one letter scaled by font_size; unknown characters draw nothing."""
        thickness = 4 if bold else 2
        for sx0, sy0, sx1, sy1 in glyph(letter):
            self.draw_line(
                x + sx0 * font_size,
                y + sy0 * font_size,
                x + sx1 * font_size,
                y + sy1 * font_size,
                color,
                thickness,
            )

    def draw_string(
        self,
        x: int,
        y: int,
        text: str,
        color: int,
        font_size: int,
        letter_spacing: int,
        bold: bool,
    ) -> None:
        """Draw text left to right, advancing letter_spacing pixels per character."""
        for offset, letter in enumerate(text):
            self.draw_letter(x + offset * letter_spacing, y, letter, color, font_size, bold)

    def to_ppm(self) -> bytes:
        """Encode the screen as a binary PPM image."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for word in self._pixels:
            body += bytes((word & 0xFF, (word >> 8) & 0xFF, (word >> 16) & 0xFF))
        return header + bytes(body)