"""Layout configuration loaded from environment variables.

Every tunable constant of the layout engine lives here so a presentation
layer can adjust zoom strength or hour emphasis without code changes.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from calgrid.models import ViewMode, ViewProfile


class LayoutConfig(BaseSettings):
    """Layout configuration loaded from environment variables.

    Settings are read from CALGRID_* environment variables with sensible
    defaults. For local development, create a .env file in the project root.
    """

    # Hour-axis emphasis per view mode
    day_hour_weight: float = Field(
        default=10.0,
        gt=0,
        description="Weight of an hour containing appointments in Day view",
    )
    week_hour_weight: float = Field(
        default=10.0,
        gt=0,
        description="Weight of an hour containing appointments in Week view",
    )
    month_hour_weight: float = Field(
        default=1000.0,
        gt=0,
        description="Weight of an hour containing appointments in Month view",
    )

    # Zoom
    zoom_row_weight: float = Field(
        default=7.0,
        gt=0,
        description="Row weight of the zoomed cell (other rows weigh 1.0)",
    )
    zoom_col_weight: float = Field(
        default=3.0,
        gt=0,
        description="Column weight of the zoomed cell (other columns weigh 1.0)",
    )

    # Header band above the grid
    header_height_rate: float = Field(
        default=2.0,
        ge=0,
        description="Header height as a multiple of the header font height",
    )
    header_font_height: float = Field(
        default=22.0,
        ge=0,
        description="Header font height in pixels (height plus descent)",
    )

    # Cell furniture
    day_label_inset: float = Field(
        default=5.0,
        ge=0,
        description="Offset of the day number from the cell's top-left corner",
    )
    big_box_padding: float = Field(
        default=3.0,
        ge=0,
        description="Inner padding of appointment boxes in Day and Week view",
    )
    small_box_padding: float = Field(
        default=0.0,
        ge=0,
        description="Inner padding of appointment boxes in Month view",
    )

    # Click-to-create
    new_appointment_minutes: int = Field(
        default=80,
        gt=0,
        description="Duration of an appointment created by clicking the grid",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "CALGRID_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def header_height(self) -> float:
        """Pixel height reserved above the grid for column headers."""
        return self.header_height_rate * self.header_font_height


# Singleton pattern
_config: LayoutConfig | None = None


def get_config() -> LayoutConfig:
    """Get the layout configuration singleton.

    Returns:
        LayoutConfig: Layout configuration instance
    """
    global _config
    if _config is None:
        _config = LayoutConfig()
    return _config


def view_profile(mode: ViewMode, config: LayoutConfig | None = None) -> ViewProfile:
    """Per-mode layout constants.

    Day and Week draw hour lines and labels and give busy hours
    day_hour_weight / week_hour_weight. Month draws no hour axis; its large
    weight makes boxes fill the cell height.
    """
    config = config or get_config()
    if mode is ViewMode.MONTH:
        return ViewProfile(
            hour_weight=config.month_hour_weight,
            lines_on_hours=False,
            label_hours=False,
            day_numbers=True,
            box_padding=config.small_box_padding,
        )
    hour_weight = config.day_hour_weight if mode is ViewMode.DAY else config.week_hour_weight
    return ViewProfile(
        hour_weight=hour_weight,
        lines_on_hours=True,
        label_hours=True,
        day_numbers=True,
        box_padding=config.big_box_padding,
    )
