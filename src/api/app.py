from contextlib import asynccontextmanager
import logging
import os

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.middleware import MethodOverrideMiddleware
from src.db import repository
from src.db.database import Store, get_db
from src.models.campground import CampgroundIn, ReviewIn, validate_campground, validate_review

# Configure logging - Adjust format to remove INFO/WARNING prefixes
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong!"
NOT_FOUND_MESSAGE = "Page not found"
ANY_METHOD = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(__file__), "templates"))


def format_number(value):
    """Render 25.0 as "25" and 12345.67 as "12345.67"."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


templates.env.filters["number"] = format_number

router = APIRouter()


def _redirect(url):
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def _campground_or_404(db, campground_id):
    campground = repository.get_campground(db, campground_id)
    if not campground:
        raise HTTPException(status_code=404, detail="Campground not found")
    return campground


@router.get("/")
def home(request: Request):
    return templates.TemplateResponse(request, "home.html")


@router.get("/campgrounds")
def list_campgrounds(request: Request, db: Session = Depends(get_db)):
    campgrounds = repository.list_campgrounds(db)
    return templates.TemplateResponse(request, "campgrounds/index.html", {"campgrounds": campgrounds})


@router.get("/campgrounds/new")
def new_campground_form(request: Request):
    return templates.TemplateResponse(request, "campgrounds/new.html")


@router.post("/campgrounds")
def create_campground(
    data: CampgroundIn = Depends(validate_campground),
    db: Session = Depends(get_db)
):
    campground = repository.create_campground(db, data)
    return _redirect(f"/campgrounds/{campground.id}")


@router.get("/campgrounds/{campground_id}")
def show_campground(campground_id: str, request: Request, db: Session = Depends(get_db)):
    campground = _campground_or_404(db, campground_id)
    reviews = repository.get_reviews(db, campground)
    return templates.TemplateResponse(
        request,
        "campgrounds/show.html",
        {"campground": campground, "reviews": reviews}
    )


@router.get("/campgrounds/{campground_id}/edit")
def edit_campground_form(campground_id: str, request: Request, db: Session = Depends(get_db)):
    campground = _campground_or_404(db, campground_id)
    return templates.TemplateResponse(request, "campgrounds/edit.html", {"campground": campground})


@router.put("/campgrounds/{campground_id}")
def update_campground(
    campground_id: str,
    data: CampgroundIn = Depends(validate_campground),
    db: Session = Depends(get_db)
):
    campground = _campground_or_404(db, campground_id)
    repository.update_campground(db, campground, data)
    return _redirect(f"/campgrounds/{campground_id}")


@router.delete("/campgrounds/{campground_id}")
def delete_campground(campground_id: str, db: Session = Depends(get_db)):
    campground = _campground_or_404(db, campground_id)
    repository.delete_campground(db, campground)
    return _redirect("/campgrounds")


@router.post("/campgrounds/{campground_id}/reviews")
def create_review(
    campground_id: str,
    data: ReviewIn = Depends(validate_review),
    db: Session = Depends(get_db)
):
    campground = _campground_or_404(db, campground_id)
    repository.add_review(db, campground, data)
    return _redirect(f"/campgrounds/{campground_id}")


@router.delete("/campgrounds/{campground_id}/reviews/{review_id}")
def delete_review(campground_id: str, review_id: str, db: Session = Depends(get_db)):
    campground = _campground_or_404(db, campground_id)
    if not repository.delete_review(db, campground, review_id):
        raise HTTPException(status_code=404, detail="Review not found")
    return _redirect(f"/campgrounds/{campground_id}")


def _render_error(request, status_code, message):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail or DEFAULT_ERROR_MESSAGE
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed with {exc.status_code}: {message}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {message}")
    return _render_error(request, exc.status_code, message)


async def unhandled_error_handler(request: Request, exc: Exception):
    message = str(exc) or DEFAULT_ERROR_MESSAGE
    logger.error(f"Error handling {request.method} {request.url.path}: {message}", exc_info=exc)
    return _render_error(request, 500, message)


def create_app(store=None):
    """
    Build the web application around a store.

    Args:
        store: Store to serve from; defaults to one built from DB_URL.
            It is opened on startup and closed on shutdown.
    """
    store = store or Store()

    @asynccontextmanager
    async def lifespan(app):
        store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title="YelpCamp",
        description="Campground listings and reviews",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.store = store

    app.add_middleware(MethodOverrideMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(router)

    # Registered last so every other route gets first pick
    @app.api_route("/{path:path}", methods=ANY_METHOD, include_in_schema=False)
    def not_found(path: str):
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)

    return app


app = create_app()
