import argparse
import os

import ladle.routers.router_color as router_color
import ladle.routers.router_site as router_site
from ladle.internal.config import Config
from ladle.internal.operations import ColorOperations, default_operations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("[Server] Ready")
    yield
    print("[Server] Shutting down")


def create_server(config: Config, operations: ColorOperations | None = None) -> FastAPI:
    server = FastAPI(title="Ladle", lifespan=lifespan)

    server.add_middleware(
        CORSMiddleware,
        allow_origins=config.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    server.include_router(router_color.create_router(
        operations or default_operations(),
        config.default_palette_count,
    ))
    server.include_router(router_site.router)

    return server


config = Config(os.environ.get("LADLE_CONFIG", "config.ini"))
server = create_server(config)


if __name__ == "__main__":

    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str)
    parser.add_argument("--port", type=int)
    parser.add_argument("--hotreload", action="store_true")
    parser.add_argument("--config", type=str)
    args = parser.parse_args()

    if args.config:
        # uvicorn re-imports the module on reload, so the path has to survive via env
        os.environ["LADLE_CONFIG"] = args.config
        config = Config(args.config)

    uvicorn.run(
        "ladle.main:server",
        host=args.host or config.host,
        port=args.port or config.port,
        reload=args.hotreload or config.hotreload,
    )
