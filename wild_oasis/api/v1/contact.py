"""Contact API router — messages from the public contact form."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wild_oasis.api.deps import get_db
from wild_oasis.models.contact import ContactMessage
from wild_oasis.schemas.contact import ContactRequest, ContactResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post(
    "",
    response_model=ContactResponse,
    summary="Send a message to the hotel",
)
async def send_contact_message(
    body: ContactRequest,
    db: AsyncSession = Depends(get_db),
) -> ContactResponse:
    """Store a contact message. All four fields are required."""
    message = ContactMessage(
        full_name=body.full_name,
        email=body.email,
        subject=body.subject,
        message=body.message,
    )
    db.add(message)
    try:
        await db.flush()
    except SQLAlchemyError:
        logger.exception("Storing contact message from %s failed", body.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not send your message, please try again",
        ) from None

    return ContactResponse(success=True, message="thanks for your message, we will contact you soon")
