from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form, Request
from typing import List, Optional
import logging

from auth import Principal, get_current_admin
from config import Settings
from database import get_attachment_store
from models import OPTIONAL_COMMENT_FIELDS
import schemas
from services import CommentRepository, AttachmentStore, discard_attachment, validate_image
from services.exceptions import AttachmentRejected, NotFoundError
from .deps import get_app_settings, get_comment_repository
from .limiter import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/comments", tags=["Comments"])

TRUE_VALUES = ('true', '1', 'yes', 'on')


def find_comment(comments: CommentRepository, comment_id: str, action: str) -> dict:
    """Look up a comment, translating storage failures to 500 and absence to 404"""
    try:
        comment = comments.get_by_id(comment_id)
    except Exception as e:
        logger.exception("Error fetching comment %s", comment_id)
        raise HTTPException(status_code=500, detail=f"Failed to {action} comment: {str(e)}")

    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment


def save_image(
    image: Optional[UploadFile],
    attachments: AttachmentStore,
    max_bytes: int
) -> Optional[str]:
    """Validate and store an uploaded image, returning its URL"""
    if not image or not image.filename:
        return None

    # Read one byte past the cap so oversized uploads are detected without buffering them whole
    contents = image.file.read(max_bytes + 1)
    try:
        validate_image(image.content_type, len(contents), max_bytes)
    except AttachmentRejected as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    try:
        return attachments.store(contents, image.filename, image.content_type)
    except Exception as e:
        logger.exception("Error saving image")
        raise HTTPException(status_code=500, detail=f"Failed to process image: {str(e)}")


@router.post("", response_model=schemas.CommentResponse, status_code=201)
@limiter.limit("10/minute")
def create_comment(
    request: Request,
    fullName: str = Form(..., min_length=1),
    email: str = Form(..., min_length=1),
    message: str = Form(..., min_length=1),
    company: str = Form(""),
    phone: str = Form(""),
    website: str = Form(""),
    products: str = Form(""),
    image: Optional[UploadFile] = File(None),
    comments: CommentRepository = Depends(get_comment_repository),
    attachments: AttachmentStore = Depends(get_attachment_store),
    settings: Settings = Depends(get_app_settings)
):
    """Submit a comment with an optional image; it awaits moderation"""
    image_url = save_image(image, attachments, settings.max_upload_bytes)

    fields = {
        "fullName": fullName,
        "email": email,
        "message": message,
        "company": company,
        "phone": phone,
        "website": website,
        "products": products
    }
    try:
        return comments.create(fields, image_url)
    except Exception as e:
        logger.exception("Error adding comment")
        discard_attachment(attachments, image_url)
        raise HTTPException(status_code=500, detail=f"Failed to add comment: {str(e)}")


@router.get("", response_model=List[schemas.CommentResponse])
def get_comments(comments: CommentRepository = Depends(get_comment_repository)):
    """Get all comments, newest first"""
    try:
        return comments.list()
    except Exception:
        logger.exception("Error fetching comments")
        raise HTTPException(status_code=500, detail="Failed to fetch comments")


@router.get("/{comment_id}", response_model=schemas.CommentResponse)
def get_comment(comment_id: str, comments: CommentRepository = Depends(get_comment_repository)):
    """Get a single comment by ID"""
    return find_comment(comments, comment_id, "fetch")


@router.put("/{comment_id}/approve", response_model=schemas.CommentActionResponse)
def approve_comment(
    comment_id: str,
    comments: CommentRepository = Depends(get_comment_repository),
    current_admin: Principal = Depends(get_current_admin)
):
    """Approve a comment (Admin only)"""
    try:
        return comments.approve(comment_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Comment not found")
    except Exception:
        logger.exception("Error approving comment %s", comment_id)
        raise HTTPException(status_code=500, detail="Failed to approve comment")


@router.put("/{comment_id}", response_model=schemas.CommentResponse)
def update_comment(
    comment_id: str,
    fullName: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    message: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    website: Optional[str] = Form(None),
    products: Optional[str] = Form(None),
    approved: Optional[str] = Form(None),
    removeImage: Optional[str] = Form(None),
    clearFields: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    comments: CommentRepository = Depends(get_comment_repository),
    attachments: AttachmentStore = Depends(get_attachment_store),
    settings: Settings = Depends(get_app_settings),
    current_admin: Principal = Depends(get_current_admin)
):
    """Partially update a comment, optionally replacing or removing its image (Admin only)

    Blank form values are ignored; list optional fields in clearFields
    (comma separated) to reset them to an empty string.
    """
    find_comment(comments, comment_id, "update")

    # Collect update data
    update_data = {}
    if fullName is not None: update_data["fullName"] = fullName
    if email is not None: update_data["email"] = email
    if message is not None: update_data["message"] = message
    if company is not None: update_data["company"] = company
    if phone is not None: update_data["phone"] = phone
    if website is not None: update_data["website"] = website
    if products is not None: update_data["products"] = products
    if clearFields:
        for field in clearFields.split(","):
            field = field.strip()
            if field not in OPTIONAL_COMMENT_FIELDS:
                raise HTTPException(status_code=400, detail=f"Field cannot be cleared: {field}")
            update_data[field] = ""
    if approved is not None:
        update_data["approved"] = approved.lower() in TRUE_VALUES

    remove_image = removeImage is not None and removeImage.lower() in TRUE_VALUES

    # Removal wins over a replacement upload, so the upload is never stored
    new_image_url = None
    if not remove_image:
        new_image_url = save_image(image, attachments, settings.max_upload_bytes)

    try:
        return comments.update(comment_id, update_data, new_image_url, remove_image)
    except NotFoundError:
        discard_attachment(attachments, new_image_url)
        raise HTTPException(status_code=404, detail="Comment not found")
    except Exception as e:
        logger.exception("Error updating comment %s", comment_id)
        discard_attachment(attachments, new_image_url)
        raise HTTPException(status_code=500, detail=f"Failed to update comment: {str(e)}")


@router.delete("/{comment_id}", response_model=schemas.CommentActionResponse)
def delete_comment(
    comment_id: str,
    comments: CommentRepository = Depends(get_comment_repository),
    attachments: AttachmentStore = Depends(get_attachment_store),
    current_admin: Principal = Depends(get_current_admin)
):
    """Delete a comment and its image (Admin only)"""
    comment = find_comment(comments, comment_id, "delete")

    discard_attachment(attachments, comment.get("imageUrl"))

    try:
        return comments.delete(comment_id)
    except Exception as e:
        logger.exception("Error deleting comment %s", comment_id)
        raise HTTPException(status_code=500, detail=f"Failed to delete comment: {str(e)}")
