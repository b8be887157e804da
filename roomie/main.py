import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from roomie.config.settings import settings
from roomie.core.middleware import SecurityHeadersMiddleware
from roomie.database.supabase_client import SupabaseClient
from roomie.modules.roommates import routes as roommates_routes
from roomie.modules.groups import routes as groups_routes
from roomie.modules.bills import routes as bills_routes
from roomie.modules.chores import routes as chores_routes
from roomie.modules.shopping import routes as shopping_routes
from roomie.modules.announcements import routes as announcements_routes
from roomie.modules.dashboard import routes as dashboard_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    detail = "Internal server error" if settings.is_production else str(exc)
    return JSONResponse(status_code=500, content={"detail": detail})


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(roommates_routes.router, prefix="/api/v1")
app.include_router(groups_routes.router, prefix="/api/v1")
app.include_router(bills_routes.router, prefix="/api/v1")
app.include_router(chores_routes.router, prefix="/api/v1")
app.include_router(shopping_routes.router, prefix="/api/v1")
app.include_router(announcements_routes.router, prefix="/api/v1")
app.include_router(dashboard_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info(f"Application startup ({settings.environment})")
    if not SupabaseClient.is_configured():
        logger.warning("SUPABASE_URL / SUPABASE_KEY not set; store calls will fail")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": "Welcome to roomie-backend", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness check: reports whether the Supabase connection is configured."""
    if not SupabaseClient.is_configured():
        return JSONResponse(status_code=503, content={"status": "not ready"})
    return {"status": "ready"}
