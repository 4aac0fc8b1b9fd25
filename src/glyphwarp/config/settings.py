"""Configuration settings for Glyphwarp."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometry operations.

    Tolerances are absolute, in artwork units, except ``jacobian_step`` which
    is relative to the size of the source artwork.
    """

    corner_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Distance under which a frame vertex matches a corner",
    )
    degenerate_length: float = Field(
        default=1e-9,
        ge=0.0,
        description="Side length at or below which a projection is degenerate",
    )
    arc_length_tolerance: float = Field(
        default=0.005,
        gt=0.0,
        le=1.0,
        description="Tolerance for measuring cubic arc length",
    )
    arc_length_samples: int = Field(
        default=32,
        ge=4,
        le=512,
        description="Lookup table pieces per curve for arc-length inversion",
    )
    jacobian_step: float = Field(
        default=1e-4,
        gt=0.0,
        le=0.1,
        description="Finite difference step for handle derivation (fraction of artwork size)",
    )

    def get_jacobian_step(self, size: float) -> float:
        """Get the finite difference step scaled for an artwork size.

        Args:
            size: Largest dimension of the source artwork

        Returns:
            Absolute step, never zero
        """
        if size <= 0:
            return self.jacobian_step
        return self.jacobian_step * size


class DisplayConfig(BaseModel):
    """Colours and styling for rendered artwork and the outline frame."""

    canvas_color: str = Field(
        default="#ffffff",
        description="Fill colour of the outline frame (matches the canvas)",
    )
    fill_color: str = Field(
        default="#7D5965",
        description="Fill colour of the warped artwork",
    )
    outline_color: str = Field(
        default="lightgray",
        description="Stroke colour of the outline frame while editing",
    )
    dash_array: list[float] = Field(
        default_factory=lambda: [5.0, 5.0],
        description="Dash pattern of the outline frame stroke",
    )
    margin: float = Field(
        default=10.0,
        ge=0.0,
        description="Margin around exported artwork",
    )


class TextConfig(BaseModel):
    """Configuration for laying out text as artwork."""

    font_size: float | None = Field(
        default=None,
        gt=0.0,
        description="Em size of the laid out text (None = font units)",
    )
    letter_spacing: float = Field(
        default=0.0,
        description="Extra advance between glyphs in font units",
    )

    def get_scale(self, units_per_em: int) -> float:
        """Get the factor converting font units to artwork units.

        Args:
            units_per_em: Font's units per em

        Returns:
            Scale factor (1.0 when no font size is set)
        """
        if self.font_size is None:
            return 1.0
        return self.font_size / units_per_em


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class WarpSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> WarpSettings:
    """Get default application settings."""
    return WarpSettings()
