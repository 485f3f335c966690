from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base


class ClassSchedule(Base):
    """
    Еженедельный слот доступности занятия.
    Интервал полуоткрытый: [from, to), значения в минутах от полуночи.
    """
    __tablename__ = "class_schedules"
    __table_args__ = (
        CheckConstraint("week_day >= 0 AND week_day <= 6", name="ck_class_schedules_week_day"),
        CheckConstraint('"from" >= 0 AND "from" < "to" AND "to" <= 1440', name="ck_class_schedules_interval"),
    )

    id = Column(Integer, primary_key=True)
    class_id = Column(
        Integer,
        ForeignKey("classes.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    week_day = Column(Integer, nullable=False)  # 0=Воскресенье, 1=Понедельник...
    from_ = Column("from", Integer, nullable=False)
    to = Column("to", Integer, nullable=False)

    class_ = relationship("Class", back_populates="schedules")
