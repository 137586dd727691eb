from contextlib import asynccontextmanager

from fastapi import FastAPI

from contacts_api.config import BACKEND_SQL, get_settings
from contacts_api.database import create_tables, get_sessionmaker
from contacts_api.errors import register_exception_handlers
from contacts_api.log import configure_logging
from contacts_api.routers import user_router, users_router

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # local runs on the sql backend start from an empty database
    if settings.store_backend == BACKEND_SQL:
        await create_tables(get_sessionmaker(settings.database_url))
    yield


app = FastAPI(title="User Contact Info API", lifespan=lifespan, redirect_slashes=False)

app.include_router(users_router.router, prefix="/users", tags=["Users"])
app.include_router(user_router.router, prefix="/users", tags=["User"])
register_exception_handlers(app)


# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}
