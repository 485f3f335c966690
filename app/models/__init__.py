from .user import User
from .class_offering import Class
from .class_schedule import ClassSchedule

__all__ = ["User", "Class", "ClassSchedule"]
