from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from app.errors import install_loop_exception_handler, install_process_hooks, register_exception_handlers
from app.middleware import RequestLoggingMiddleware
from app.routes import financial, psychometric
from config.settings import Settings, get_settings
from gateway.gateway import AdviceGateway, build_gateway


settings = get_settings()
logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("advice_gateway")


def create_app(settings: Optional[Settings] = None, gateway: Optional[AdviceGateway] = None) -> FastAPI:
    settings = settings or get_settings()
    gateway = gateway or build_gateway(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        restore_process_hooks = install_process_hooks(settings)
        restore_loop_handler = install_loop_exception_handler(settings, asyncio.get_running_loop())
        try:
            if settings.probe_on_startup:
                is_working = await run_in_threadpool(gateway.test_provider)
                logger.info("Gemini API working: %s", is_working)
                if not is_working:
                    logger.warning("Gemini API is not working. The application will use mock responses.")
            yield
        finally:
            restore_loop_handler()
            restore_process_hooks()

    app = FastAPI(title="Financial Advice Gateway", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    register_exception_handlers(app, settings)

    @app.get("/health")
    def health():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/test")
    def test():
        return {"message": "Server is working!"}

    app.include_router(financial.router, prefix="/api/financial")
    app.include_router(psychometric.router, prefix="/api/psychometric")
    return app


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
