from fastapi import Depends

from folio.repos.posts_repo import FilePostsRepo
from folio.schemas.meta import SiteDefaults
from folio.services.posts_service import PostsService
from folio.settings import Settings, get_settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.POSTS_DIR)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_site_defaults(
    current_settings: Settings = Depends(get_settings),
) -> SiteDefaults:
    return current_settings.site_defaults
