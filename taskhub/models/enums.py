"""Enumerated column values, stored exactly as the API exposes them."""

import enum


class TaskStatus(str, enum.Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class SubTaskStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class Priority(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class NotificationType(str, enum.Enum):
    INVITE = "Invite"
    ANNOUNCEMENT = "Announcement"
    REMINDER = "Reminder"


class ReadStatus(str, enum.Enum):
    UNREAD = "Unread"
    READ = "Read"


def enum_values(enum_cls):
    return [member.value for member in enum_cls]
