from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import AppConfig, configure_logging, load_config, resolve_config_path
from core.doclink import create_doc_link_resolver
from router.api import router as api_router

logger = logging.getLogger(__name__)


def _install_cors(fastapi_app: FastAPI) -> None:
    # Middleware can only be added before the app starts serving, so the
    # config is read once here as well as at startup.
    try:
        config = load_config(resolve_config_path())
    except Exception as e:
        logger.warning("Could not read config while building the app: %s", e)
        return

    if config.cors_enabled:
        fastapi_app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=False,
        )


def create_app() -> FastAPI:
    load_dotenv(override=False)

    fastapi_app = FastAPI(title="docwiki", version="0.1.0")
    _install_cors(fastapi_app)
    fastapi_app.include_router(api_router, prefix="/api/v1")

    @fastapi_app.on_event("startup")
    def _startup() -> None:
        load_dotenv(override=False)

        config_path = resolve_config_path()
        config: AppConfig = load_config(config_path)
        configure_logging(config.debug_level)

        state = fastapi_app.state
        state.config = config
        state.config_path = config_path
        state.startup_error = None
        state.doc_links = None

        try:
            # Returns immediately; each project's search data is read in
            # its own thread and lookups wait for that project only.
            state.doc_links = create_doc_link_resolver(config.doc_project_index)
        except Exception as e:
            logger.exception("Cannot load documentation project index %s", config.doc_project_index)
            state.startup_error = str(e)

    return fastapi_app


app = create_app()


def main() -> None:
    load_dotenv(override=False)

    config = load_config()
    configure_logging(config.debug_level)

    uvicorn.run("app:app", host="127.0.0.1", port=config.api_port, reload=False)


if __name__ == "__main__":
    main()
