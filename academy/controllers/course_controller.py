"""
Course Controller Module
JSON API over the course catalog
"""
from flask import Blueprint, current_app, jsonify
from academy.errors import NotFoundError
import logging

logger = logging.getLogger(__name__)
course_bp = Blueprint('course', __name__)


def _course_service():
    return current_app.extensions['course_service']


@course_bp.route('/courses', methods=['GET'])
def list_courses():
    """
    Return the full course list
    @returns: JSON array as stored, or 404 {"error": ...}
    """
    try:
        courses = _course_service().get_all_courses()
    except NotFoundError as e:
        return jsonify({'error': e.message}), e.status_code

    return jsonify(courses), 200


@course_bp.route('/courses/<course_id>', methods=['GET'])
def get_course(course_id):
    """
    Return one course exactly as stored
    @param course_id: str - id from the URL
    @returns: Course JSON, or 404 {"error": "Course not found."}
    """
    try:
        course = _course_service().get_course(course_id)
    except NotFoundError as e:
        return jsonify({'error': e.message}), e.status_code

    return jsonify(course), 200
