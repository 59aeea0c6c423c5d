"""Profile ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, JSON, Uuid, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import Gender, LookingFor, RelationshipStatus


def _enum(enum_cls, name):
    return SQLEnum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])


class ProfileModel(Base):
    __tablename__ = 'profiles'

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, ForeignKey('users.id'), unique=True, nullable=False, index=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    display_name = Column(String(100), nullable=True)
    code_name = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(_enum(Gender, "gender"), nullable=True)
    looking_for = Column(_enum(LookingFor, "looking_for"), nullable=True)
    department = Column(String(100), nullable=True)
    year_of_study = Column(Integer, nullable=True)
    interests = Column(JSON, nullable=True)
    hobbies = Column(JSON, nullable=True)
    languages = Column(JSON, nullable=True)
    height = Column(Integer, nullable=True)
    relationship_status = Column(_enum(RelationshipStatus, "relationship_status"), nullable=True)

    show_age = Column(Boolean, default=True, nullable=False)
    show_distance = Column(Boolean, default=True, nullable=False)
    is_anonymous = Column(Boolean, default=False, nullable=False)
    anonymous_until = Column(DateTime, nullable=True)
    profile_completion = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship('UserModel', back_populates='profile')
