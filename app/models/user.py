from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from app.core.database import Base


class User(Base):
    """Профиль репетитора"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    avatar = Column(String, nullable=False)
    whatsapp = Column(String, nullable=False)
    bio = Column(Text, nullable=False)

    classes = relationship("Class", back_populates="user")
