from .user import User
from .client import Client
from .post import Post
from .report import Report
from .billing import Billing
from .upload import Upload

__all__ = [
    "User",
    "Client",
    "Post",
    "Report",
    "Billing",
    "Upload",
]
