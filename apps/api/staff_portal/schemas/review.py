from .base import CamelModel


class ReviewIn(CamelModel):
    # Checked against REVIEW_STATUSES in the service so the error is a 400 "Invalid status".
    status: str
