from fastapi import FastAPI
from mangum import Mangum

from contacts_api.config import get_settings
from contacts_api.errors import register_exception_handlers
from contacts_api.log import configure_logging
from contacts_api.routers.user_router import router as user_router

configure_logging(get_settings().log_level)

app = FastAPI(title="User Lambda", redirect_slashes=False)
app.include_router(user_router, prefix="/users")
register_exception_handlers(app)

handler = Mangum(app)
