from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.config import get_settings
from dependencies import get_session_cookie

router = APIRouter()
settings = get_settings()

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)
templates.env.globals["app_name"] = settings.APP_NAME


# Both pages only look at whether the cookie is present; the session
# itself is checked by the protected endpoints.

@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request):
    if get_session_cookie(request) is None:
        return RedirectResponse(url="/auth", status_code=status.HTTP_302_FOUND)
    return templates.TemplateResponse(request, "index.html")


@router.get("/auth", response_class=HTMLResponse)
async def auth_page(request: Request):
    if get_session_cookie(request) is not None:
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    return templates.TemplateResponse(request, "auth.html")
