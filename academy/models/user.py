"""
Session User Model Module
The logged-in user as kept in the session cookie
"""
from typing import Dict, Optional, Any
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionUser:
    """
    SessionUser Model
    Built from the Google profile at login; there is no user store behind it.
    """
    google_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: Dict[str, Any]) -> 'SessionUser':
        """
        Build a user from an OpenID Connect userinfo payload
        @param profile: dict - userinfo claims ('sub', 'email', 'name', 'picture')
        @returns: SessionUser
        @raises: ValueError if the profile carries no subject id
        """
        google_id = profile.get('sub') or profile.get('id')
        if not google_id:
            raise ValueError("Google profile has no subject id")
        return cls(
            google_id=str(google_id),
            email=profile.get('email'),
            name=profile.get('name') or profile.get('given_name'),
            picture=profile.get('picture')
        )

    def to_session(self) -> Dict[str, Optional[str]]:
        return {
            'googleId': self.google_id,
            'email': self.email,
            'name': self.name,
            'picture': self.picture
        }

    @classmethod
    def from_session(cls, data: Optional[Dict[str, Any]]) -> Optional['SessionUser']:
        if not data or not data.get('googleId'):
            return None
        return cls(
            google_id=data['googleId'],
            email=data.get('email'),
            name=data.get('name'),
            picture=data.get('picture')
        )

    @property
    def display_name(self) -> str:
        return self.name or self.email or self.google_id
