"""Infrastructure ORM Models"""

from .user_model import UserModel
from .profile_model import ProfileModel

__all__ = [
    'UserModel',
    'ProfileModel',
]
