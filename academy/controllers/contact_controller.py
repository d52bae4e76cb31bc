"""
Contact Controller Module
Receives contact-form submissions
"""
from flask import Blueprint, current_app, jsonify, request
from academy.errors import ValidationError
import logging

logger = logging.getLogger(__name__)
contact_bp = Blueprint('contact', __name__)


@contact_bp.route('/contact', methods=['POST'])
def submit_contact():
    """
    Store a contact message
    @body: {"name": str, "email": str, "message": str} as JSON or form data
    @returns: {"success": true, "message": ...}, or 400 {"error": ...}
    """
    data = request.get_json(silent=True) if request.is_json else request.form.to_dict()
    if not isinstance(data, dict):
        data = {}

    try:
        current_app.extensions['message_store'].append_message(
            name=data.get('name'),
            email=data.get('email'),
            message=data.get('message')
        )
    except ValidationError as e:
        return jsonify({'error': e.message}), e.status_code

    return jsonify({
        'success': True,
        'message': 'Message received successfully!'
    }), 200
