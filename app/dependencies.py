from fastapi import Depends

from app.db.postgres.base import get_db
from app.repos.authors_repo import AuthorsRepo
from app.repos.posts_repo import PostsRepo
from app.services.posts_service import PostsService
from app.services.publish_service import PublishService
from app.services.readiness import check_publish_ready
from app.services.shopify_publisher import ExternalPublisher, ShopifyPublisher


def get_posts_repo(db=Depends(get_db)):
    return PostsRepo(db)


def get_authors_repo(db=Depends(get_db)):
    return AuthorsRepo(db)


def get_readiness_check():
    return check_publish_ready


def get_external_publisher() -> ExternalPublisher:
    return ShopifyPublisher()


def get_posts_service(
    repo=Depends(get_posts_repo),
    authors_repo=Depends(get_authors_repo),
):
    return PostsService(repo=repo, authors_repo=authors_repo)


def get_publish_service(
    repo=Depends(get_posts_repo),
    readiness_check=Depends(get_readiness_check),
    external_publisher=Depends(get_external_publisher),
):
    return PublishService(
        repo=repo,
        readiness_check=readiness_check,
        external_publisher=external_publisher,
    )
