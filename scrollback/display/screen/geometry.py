# display/screen/geometry.py

from dataclasses import dataclass

from ...errors import GeometryError

OUTPUT_TOP = 2
MIN_HEIGHT = 4


@dataclass(frozen=True)
class ViewportGeometry:
    """
    Screen layout derived from the terminal size.

    Row 1 holds the header separator, rows output_top..output_bottom the
    transcript, the next row the footer separator and the last row the prompt.
    """

    width: int
    output_top: int
    output_bottom: int
    prompt_row: int

    @classmethod
    def recompute(cls, width: int, height: int) -> "ViewportGeometry":
        if width < 1 or height < MIN_HEIGHT:
            raise GeometryError(f"Terminal too small: {width}x{height}")
        return cls(
            width=width,
            output_top=OUTPUT_TOP,
            output_bottom=height - 2,
            prompt_row=height,
        )

    @property
    def visible_rows(self) -> int:
        return self.output_bottom - self.output_top + 1

    @property
    def footer_row(self) -> int:
        return self.output_bottom + 1
