"""
Pages Controller Module
Server-rendered course catalog pages
"""
from flask import Blueprint, current_app, redirect, render_template, url_for
from academy.errors import NotFoundError
import logging

logger = logging.getLogger(__name__)
pages_bp = Blueprint('pages', __name__)


def _course_service():
    return current_app.extensions['course_service']


@pages_bp.route('/', methods=['GET'])
def index():
    """
    Render the course list with the login link and the contact form
    @returns: index.html, or error.html with 404 when the courses file is missing
    """
    try:
        courses = _course_service().get_all_courses()
    except NotFoundError as e:
        return render_template('error.html', message=e.message), e.status_code

    return render_template('index.html', courses=courses)


@pages_bp.route('/courses', methods=['GET'])
def courses():
    # old entry point for the list, now served from the home page
    return redirect(url_for('pages.index'))


@pages_bp.route('/course/<course_id>', methods=['GET'])
def course_detail(course_id):
    """
    Render a single course page
    @param course_id: str - id from the URL
    @returns: course.html, or error.html with 404 for an unknown course
    """
    try:
        course = _course_service().get_course(course_id)
    except NotFoundError as e:
        return render_template('error.html', message=e.message), e.status_code

    return render_template('course.html', course=course, course_id=course_id)
