import argparse
import logging
import sys

from folio.errors import FolioError
from folio.repos.posts_repo import FilePostsRepo
from folio.services.posts_service import PostsService
from folio.services.site_builder import build_site
from folio.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render the site to static HTML.")
    parser.add_argument("--out", default=settings.BUILD_DIR, help="output directory")
    args = parser.parse_args(argv)

    service = PostsService(FilePostsRepo(settings.POSTS_DIR))
    try:
        build_site(args.out, service, settings)
        logger.info("Build completed successfully.")
    except FolioError as e:
        logger.error(f"Build failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
