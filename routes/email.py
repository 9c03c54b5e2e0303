from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError

from database import get_mailer
import schemas
from services import EmailService
from services.exceptions import MailDeliveryError
from .limiter import limiter

router = APIRouter(prefix="/api", tags=["Contact"])


async def read_inquiry(request: Request) -> schemas.ContactInquiry:
    """The contact page posts a form; scripted clients may post JSON"""
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed JSON body")
    else:
        data = dict(await request.form())
    try:
        return schemas.ContactInquiry.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


@router.post("/send-email")
@limiter.limit("5/minute")
async def send_email(request: Request, mailer: EmailService = Depends(get_mailer)):
    """Submit the contact form by email"""
    inquiry = await read_inquiry(request)
    try:
        await mailer.send_inquiry(inquiry.name, inquiry.email, inquiry.message, inquiry.Subject)
    except MailDeliveryError:
        return PlainTextResponse("Error sending email. Please try again later.", status_code=500)
    return RedirectResponse("/success.html", status_code=status.HTTP_303_SEE_OTHER)
