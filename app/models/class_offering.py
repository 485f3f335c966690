from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base


class Class(Base):
    """Предмет, который преподает репетитор, и стоимость занятия"""
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    subject = Column(String, index=True, nullable=False)
    cost = Column(Float, nullable=False)
    user_id = Column(
        Integer,
        ForeignKey("users.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    user = relationship("User", back_populates="classes")
    schedules = relationship("ClassSchedule", back_populates="class_", order_by="ClassSchedule.id")
