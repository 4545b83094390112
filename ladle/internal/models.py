from dataclasses import asdict
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel

from ladle.internal.color_models import Color


class RGBModel(BaseModel):
    r: int
    g: int
    b: int


class HSLModel(BaseModel):
    h: int
    s: int
    l: int


class HSVModel(BaseModel):
    h: int
    s: int
    v: int


class ColorModel(BaseModel):
    hex: str
    rgb: RGBModel
    hsl: HSLModel
    hsv: HSVModel

    @classmethod
    def from_color(cls, color: Color) -> "ColorModel":
        return cls.model_validate(asdict(color))


class BaseColorModel(BaseModel):
    hex: str | None = None
    rgb: RGBModel | None = None
    hsl: HSLModel | None = None
    hsv: HSVModel


class HexConvertRequest(BaseModel):
    type: Literal["hex"]
    value: str


class RGBConvertRequest(BaseModel):
    type: Literal["rgb"]
    value: RGBModel


class HSLConvertRequest(BaseModel):
    type: Literal["hsl"]
    value: HSLModel


class HSVConvertRequest(BaseModel):
    type: Literal["hsv"]
    value: HSVModel


class ConvertRequest(RootModel):
    root: Annotated[
        Union[HexConvertRequest, RGBConvertRequest, HSLConvertRequest, HSVConvertRequest],
        Field(discriminator="type"),
    ]


class PaletteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_color: BaseColorModel = Field(alias="baseColor")
    type: str = "analogous"
    count: int | None = None


class PaletteResponse(BaseModel):
    palette: list[ColorModel]
