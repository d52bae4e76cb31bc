"""
Auth Controller Module
Google sign-in, callback and logout routes
"""
from authlib.integrations.base_client import OAuthError
from flask import Blueprint, current_app, redirect, url_for
from academy.services import auth_service
import logging

logger = logging.getLogger(__name__)
auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/auth/google', methods=['GET'])
def google_login():
    """Send the browser to Google's consent screen"""
    redirect_uri = current_app.config.get('GOOGLE_CALLBACK_URL') or \
        url_for('auth.google_callback', _external=True)
    return auth_service.google_client().authorize_redirect(redirect_uri)


@auth_bp.route('/auth/google/callback', methods=['GET'])
def google_callback():
    """
    Complete sign-in and store the user in the session
    @returns: Redirect to the home page, whether or not sign-in succeeded
    """
    try:
        user = auth_service.fetch_google_user()
    except (OAuthError, ValueError) as e:
        logger.warning(f"Google sign-in failed: {str(e)}")
        return redirect(url_for('pages.index'))

    auth_service.login_user(user)
    return redirect(url_for('pages.index'))


@auth_bp.route('/logout', methods=['GET'])
def logout():
    auth_service.logout_user()
    return redirect(url_for('pages.index'))
