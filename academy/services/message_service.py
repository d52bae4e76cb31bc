"""
Message Service Module
Stores contact-form submissions in a JSON array file
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, List, Union
from academy.errors import ValidationError
from academy.models.message import Message
from academy.utils.logger import custom_logger

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'email', 'message')


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ''


class MessageStore:
    """
    Append-only store for contact messages.

    The file holds one JSON array. Appends are a read-modify-write of the whole
    array done under a lock, and the new content is swapped in with os.replace,
    so concurrent submissions in the same process never lose each other's
    records and readers never see a half-written file.
    """
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def __repr__(self):
        return f"MessageStore({str(self.path)!r})"

    @custom_logger.log_function_call
    def append_message(self, name: Any, email: Any, message: Any) -> Message:
        """
        Validate and store a new contact message
        @param name: Sender name
        @param email: Sender email address
        @param message: Message body
        @returns: Message - the stored record, stamped with the current time
        @raises: ValidationError if any field is missing or blank
        """
        fields = {'name': name, 'email': email, 'message': message}
        missing = [field for field in REQUIRED_FIELDS if not _is_filled(fields[field])]
        if missing:
            logger.warning(f"Rejected contact message, missing: {', '.join(missing)}")
            raise ValidationError("All fields are required.")

        new_message = Message.create(name=name, email=email, message=message)

        with self._lock:
            records = self._read_records()
            records.append(new_message.to_dict())
            self._write_records(records)

        logger.info(f"New message from {new_message.name} <{new_message.email}> at {new_message.date}")
        return new_message

    def list_messages(self) -> List[Message]:
        """Return every stored message, oldest first"""
        with self._lock:
            records = self._read_records()
        return [Message.from_dict(record) for record in records]

    def _read_records(self) -> List[dict]:
        if not self.path.exists():
            return []

        with open(self.path, 'r', encoding='utf-8') as f:
            records = json.load(f)

        if not isinstance(records, list):
            raise ValueError(f"{self.path} does not contain a JSON array")
        return records

    def _write_records(self, records: List[dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix='.tmp'
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
