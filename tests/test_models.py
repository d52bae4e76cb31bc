"""
Unit tests for the message and session user models
"""
from datetime import datetime, timezone, timedelta
import pytest
from academy.models.message import Message, utc_timestamp
from academy.models.user import SessionUser


class TestMessage:
    def test_utc_timestamp_format(self):
        moment = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))
        assert utc_timestamp(moment) == "2024-05-01T10:30:15.123Z"

    def test_create_stamps_date(self):
        message = Message.create("A", "a@x.com", "hi")
        assert message.date.endswith("Z")
        assert message.to_dict() == {"name": "A", "email": "a@x.com", "message": "hi", "date": message.date}


class TestSessionUser:
    def test_from_openid_profile(self):
        user = SessionUser.from_profile({
            "sub": "1234",
            "email": "ana@example.com",
            "name": "Ana",
            "picture": "https://example.com/ana.png",
        })
        assert user == SessionUser("1234", "ana@example.com", "Ana", "https://example.com/ana.png")

    def test_profile_without_email_or_name(self):
        user = SessionUser.from_profile({"sub": "1234"})
        assert user.email is None
        assert user.display_name == "1234"

    def test_profile_without_subject_is_rejected(self):
        with pytest.raises(ValueError):
            SessionUser.from_profile({"email": "ana@example.com"})

    def test_session_round_trip(self):
        user = SessionUser("1234", "ana@example.com", "Ana", None)
        data = user.to_session()
        assert data == {"googleId": "1234", "email": "ana@example.com", "name": "Ana", "picture": None}
        assert SessionUser.from_session(data) == user

    @pytest.mark.parametrize("data", [None, {}, {"email": "x@y.com"}])
    def test_from_session_without_user(self, data):
        assert SessionUser.from_session(data) is None
