from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter(tags = ["site"])

@router.get("/")
async def redirect_docs():
    return RedirectResponse(url="/docs")

@router.get("/api/health")
async def health():
    return {"status": "ok"}
