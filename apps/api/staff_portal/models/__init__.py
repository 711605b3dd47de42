from .user import Base, User
from .verification_code import VerificationCode
from .transfer_request import TransferRequest
from .loa_request import LoaRequest
from .notification import Notification
from .user_session import UserSession

__all__ = [
    "Base",
    "User",
    "VerificationCode",
    "TransferRequest",
    "LoaRequest",
    "Notification",
    "UserSession",
]
