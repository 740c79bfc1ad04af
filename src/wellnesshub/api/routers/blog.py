"""
Blog endpoints. Reading is public; writing is for practitioners.
"""

from fastapi import APIRouter, Depends, Request, status

from ...application.use_cases.blog_posts import CreateBlogPostUseCase, GetBlogPostUseCase, UpdateBlogPostUseCase
from ...core.auth import Principal
from ..deps import (
    get_blog_post_use_case,
    get_create_blog_post_use_case,
    get_update_blog_post_use_case,
    require_practitioner,
)
from ..schemas.blog import BlogPostCreateRequest, BlogPostSchema, BlogPostUpdateRequest
from ..schemas.common import ApiResponse
from ..utils.responses import ok

router = APIRouter(prefix="/blog", tags=["blog"])


@router.post("", response_model=ApiResponse[BlogPostSchema], status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: BlogPostCreateRequest,
    request: Request,
    principal: Principal = Depends(require_practitioner),
    use_case: CreateBlogPostUseCase = Depends(get_create_blog_post_use_case),
):
    """Create a post authored by the caller and index its embedding."""
    post = await use_case.execute(principal.user_id, payload.title, payload.content, payload.tags)
    return ok(request, data=BlogPostSchema.from_domain(post), message="Post created successfully")


@router.get("/{post_id}", response_model=ApiResponse[BlogPostSchema])
async def get_post(
    post_id: str,
    request: Request,
    use_case: GetBlogPostUseCase = Depends(get_blog_post_use_case),
):
    post = await use_case.execute(post_id)
    return ok(request, data=BlogPostSchema.from_domain(post))


@router.put("/{post_id}", response_model=ApiResponse[BlogPostSchema])
async def update_post(
    post_id: str,
    payload: BlogPostUpdateRequest,
    request: Request,
    principal: Principal = Depends(require_practitioner),
    use_case: UpdateBlogPostUseCase = Depends(get_update_blog_post_use_case),
):
    """Edit a post; only its author may do so."""
    post = await use_case.execute(principal.user_id, post_id, payload.title, payload.content, payload.tags)
    return ok(request, data=BlogPostSchema.from_domain(post), message="Post updated successfully")
