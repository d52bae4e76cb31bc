"""
Auth Service Module
Google sign-in through authlib and the session-user boundary
"""
import logging
from typing import Optional
from authlib.integrations.flask_client import OAuth
from flask import Flask, current_app, g, session
from academy.models.user import SessionUser

logger = logging.getLogger(__name__)

SESSION_USER_KEY = 'user'
GOOGLE_CLIENT_KEY = 'google_oauth'


def init_oauth(app: Flask):
    """
    Register the Google OAuth client for this app
    @param app: Flask - application being configured
    @returns: The authlib client, also stored in app.extensions
    """
    oauth = OAuth(app)
    client = oauth.register(
        name='google',
        client_id=app.config.get('GOOGLE_CLIENT_ID'),
        client_secret=app.config.get('GOOGLE_CLIENT_SECRET'),
        server_metadata_url=app.config['GOOGLE_DISCOVERY_URL'],
        client_kwargs={'scope': 'openid email profile'}
    )
    app.extensions[GOOGLE_CLIENT_KEY] = client
    return client


def google_client():
    return current_app.extensions[GOOGLE_CLIENT_KEY]


def fetch_google_user() -> SessionUser:
    """
    Finish the authorization-code exchange for the current callback request
    @returns: SessionUser built from the Google profile
    @raises: authlib OAuthError when Google rejects the request
    """
    client = google_client()
    token = client.authorize_access_token()
    profile = token.get('userinfo') or client.userinfo(token=token)
    return SessionUser.from_profile(profile)


def login_user(user: SessionUser) -> None:
    session.permanent = True
    session[SESSION_USER_KEY] = user.to_session()
    g.current_user = user
    logger.info(f"User {user.email or user.google_id} logged in")


def logout_user() -> None:
    user = current_user()
    session.clear()
    g.current_user = None
    if user:
        logger.info(f"User {user.email or user.google_id} logged out")


def current_user() -> Optional[SessionUser]:
    if 'current_user' not in g:
        g.current_user = SessionUser.from_session(session.get(SESSION_USER_KEY))
    return g.current_user
