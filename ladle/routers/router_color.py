from fastapi import APIRouter, HTTPException
from colorama import Fore, init

from ladle.internal.errors import ColorError
from ladle.internal.models import (
    ColorModel, ConvertRequest, PaletteRequest, PaletteResponse,
    HexConvertRequest, RGBConvertRequest, HSLConvertRequest,
)
from ladle.internal.operations import ColorOperations
init(autoreset=True)


def _reject(route: str, e: ColorError) -> HTTPException:
    print(f"[{route}] {Fore.YELLOW}|::| Rejected request: {e}")
    return HTTPException(status_code=400, detail=str(e))


def create_router(operations: ColorOperations, default_palette_count: int) -> APIRouter:
    router = APIRouter(
        prefix="/api",
        tags=["color"]
    )

    @router.post("/convert", response_model=ColorModel)
    def convert(body: ConvertRequest):
        req = body.root
        try:
            if isinstance(req, HexConvertRequest):
                color = operations.from_hex(req.value)
            elif isinstance(req, RGBConvertRequest):
                color = operations.from_rgb(req.value.r, req.value.g, req.value.b)
            elif isinstance(req, HSLConvertRequest):
                color = operations.from_hsl(req.value.h, req.value.s, req.value.l)
            else:
                color = operations.from_hsv(req.value.h, req.value.s, req.value.v)
        except ColorError as e:
            raise _reject("Convert", e)

        return ColorModel.from_color(color)

    @router.post("/palette", response_model=PaletteResponse)
    def palette(req: PaletteRequest):
        count = req.count if req.count is not None else default_palette_count
        base_hsv = req.base_color.hsv
        try:
            base = operations.from_hsv(base_hsv.h, base_hsv.s, base_hsv.v)
            colors = operations.palette(base, req.type, count)
        except ColorError as e:
            raise _reject("Palette", e)

        return {
            "palette": [ColorModel.from_color(c) for c in colors]
        }

    @router.get("/random", response_model=ColorModel)
    @router.post("/random", response_model=ColorModel)
    def random_color():
        return ColorModel.from_color(operations.random_color())

    return router
