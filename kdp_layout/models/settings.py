"""Physical and typographic formatting settings."""

from pydantic import BaseModel, ConfigDict, Field

TrimSize = str

# Fonts offered by the settings UI
FONT_FAMILIES: tuple[str, ...] = (
    "Times New Roman",
    "Georgia",
    "Garamond",
    "Baskerville",
    "Palatino",
    "Bookman",
    "Cambria",
    "Minion Pro",
    "Arial",
    "Helvetica",
    "Verdana",
    "Calibri",
    "Futura",
)


class FormattingSettings(BaseModel):
    """Formatting configuration for one book.

    Accepts both snake_case field names and the camelCase keys sent by the
    settings UI. Ranges are deliberately not enforced here: the engine
    re-validates every call and raises its own error types.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    trim_size: TrimSize = Field(default="6x9", alias="trimSize")
    margin_top: float = Field(default=0.75, alias="marginTop")
    margin_bottom: float = Field(default=0.75, alias="marginBottom")
    margin_inside: float = Field(default=0.75, alias="marginInside")
    margin_outside: float = Field(default=0.5, alias="marginOutside")
    bleed: bool = False
    font_family: str = Field(default="Times New Roman", alias="fontFamily")
    font_size: float = Field(default=12, alias="fontSize")
    line_spacing: float = Field(default=1.15, alias="lineSpacing")
    include_toc: bool = Field(default=True, alias="includeTOC")
    include_page_numbers: bool = Field(default=True, alias="includePageNumbers")
    include_title_page: bool = Field(default=True, alias="includeTitlePage")
