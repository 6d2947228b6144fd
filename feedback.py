import logging
from typing import Optional

from context import AppContext
from schemas import Feedback

logger = logging.getLogger(__name__)


def submit_feedback(ctx: AppContext, user_email: Optional[str], rating: Optional[float], comment: Optional[str]) -> dict:
    # rating range and empty comments are only checked by the web client
    doc = ctx.feedback.insert(Feedback(userEmail=user_email, rating=rating, comment=comment))
    logger.info("Feedback %s saved from %s", doc["_id"], user_email)
    return doc
