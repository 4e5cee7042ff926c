"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs
  - Get blog by id
  - Create blog (authenticated)
  - Delete blog (authenticated, owner only)
  - Update blog (open to everyone; this is the like button)
  - Comment on a blog (authenticated)

Path identifiers are accepted as plain strings so that a malformed id is
reported as `400 malformatted id` instead of a schema error.
"""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep, CurrentUserDep
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate, CommentCreate

router = APIRouter(prefix="/blogs", tags=["Blogs"])

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Canonical string reduction",
    "author": "Edsger W. Dijkstra",
    "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
    "likes": 12,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
    "comments": [{"text": "a classic", "user": {"username": "hellas", "name": "Arto Hellas"}}],
}

UNAUTHORIZED = {
    "description": "Missing, invalid or expired token",
    "content": {"application/json": {"example": {"error": "token missing or invalid"}}},
}
MALFORMED_ID = {
    "description": "Malformed id",
    "content": {"application/json": {"example": {"error": "malformatted id"}}},
}
NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"error": "resource not found"}}},
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="List every blog with its owner and comment authors resolved.",
    responses={200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}}},
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    """List all blogs, oldest first."""
    return await service.list_blogs()


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMED_ID,
        404: NOT_FOUND,
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, service: BlogServiceDep) -> BlogResponse:
    return await service.get_blog(blog_id)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Missing title or url",
            "content": {"application/json": {"example": {"error": "title is required"}}},
        },
        401: UNAUTHORIZED,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: BlogCreate,
    user: CurrentUserDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a blog and add it to the owner's blog list.

    `likes` defaults to 0 when omitted.
    """
    return await service.create_blog(user, blog)


@router.delete(
    "/{blog_id}",
    response_class=Response,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a blog",
    description="Delete a blog. Only its owner may do so.",
    responses={
        400: {
            "description": "Malformed id or not the owner",
            "content": {
                "application/json": {
                    "example": {"error": "target blog belongs to another user"},
                },
            },
        },
        401: UNAUTHORIZED,
        404: NOT_FOUND,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: str,
    user: CurrentUserDep,
    service: BlogServiceDep,
) -> Response:
    await service.delete_blog(user, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update a blog",
    description=(
        "Replace the supplied fields of a blog. No authentication is required; "
        "clients send the new absolute like count."
    ),
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMED_ID,
        404: NOT_FOUND,
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    blog: BlogUpdate,
    service: BlogServiceDep,
) -> BlogResponse:
    return await service.update_blog(blog_id, blog)


@router.post(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Comment on a blog",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMED_ID,
        401: UNAUTHORIZED,
        404: NOT_FOUND,
    },
    operation_id="blogs_comment",
)
async def add_comment(
    blog_id: str,
    comment: CommentCreate,
    user: CurrentUserDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """Append a comment by the authenticated user and return the populated blog."""
    return await service.add_comment(user, blog_id, comment.text)
