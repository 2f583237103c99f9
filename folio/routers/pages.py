import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from folio import dependencies as deps
from folio.pages.about import about_page
from folio.pages.home import home_page
from folio.pages.post import post_page
from folio.schemas.meta import SiteDefaults
from folio.services.layout import render_layout
from folio.services.posts_service import PostsService, post_url
from folio.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def home(
    service: PostsService = Depends(deps.get_posts_service),
    defaults: SiteDefaults = Depends(deps.get_site_defaults),
):
    try:
        page = home_page(service.list_posts())
    except Exception as e:
        logger.error(f"Unexpected error rendering home page: {e}")
        raise HTTPException(status_code=500, detail="Failed to render page")
    return render_layout(page.content, page.meta, defaults=defaults, path="/")


@router.get("/about")
def about(
    current_settings: Settings = Depends(get_settings),
    defaults: SiteDefaults = Depends(deps.get_site_defaults),
):
    page = about_page(current_settings)
    return render_layout(page.content, page.meta, defaults=defaults, path="/about")


@router.get("/posts/{slug}")
def post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    defaults: SiteDefaults = Depends(deps.get_site_defaults),
):
    try:
        detail = service.get_post(slug)
        if not detail:
            raise HTTPException(status_code=404, detail="Post not found")
        page = post_page(detail)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
    return render_layout(page.content, page.meta, defaults=defaults, path=post_url(slug))
