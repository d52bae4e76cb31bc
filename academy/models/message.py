"""
Message Model Module
Defines the contact-form Message data model
"""
from datetime import datetime, timezone
from typing import Dict, Optional
from dataclasses import dataclass, asdict


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T10:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class Message:
    """
    Message Model
    One contact-form submission as stored in messages.json
    """
    name: str
    email: str
    message: str
    date: str

    @classmethod
    def create(cls, name: str, email: str, message: str) -> 'Message':
        return cls(name=name, email=email, message=message, date=utc_timestamp())

    @classmethod
    def from_dict(cls, data: Dict) -> 'Message':
        return cls(
            name=data.get('name', ''),
            email=data.get('email', ''),
            message=data.get('message', ''),
            date=data.get('date', '')
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
