"""
Course Service Module
Read-only access to the course catalog stored as JSON files on disk
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union
from werkzeug.security import safe_join
from academy.errors import NotFoundError
from academy.utils.logger import custom_logger

logger = logging.getLogger(__name__)


class CourseService:
    """
    Service class for course lookups.
    The list comes from a single JSON array file; each course detail lives in
    its own <id>.json file under the courses directory. Nothing is cached,
    every call reads the file again.
    """
    def __init__(self, courses_file: Union[str, Path], courses_dir: Union[str, Path]):
        """
        @param courses_file: Path to the JSON array with the course list
        @param courses_dir: Directory holding one <id>.json file per course
        """
        self.courses_file = Path(courses_file)
        self.courses_dir = Path(courses_dir)

    def __repr__(self):
        return f"CourseService({str(self.courses_file)!r}, {str(self.courses_dir)!r})"

    @custom_logger.log_function_call
    def get_all_courses(self) -> List[Any]:
        """
        Read the course list
        @returns: The JSON array exactly as stored
        @raises: NotFoundError if the courses file does not exist
        """
        if not self.courses_file.exists():
            logger.warning(f"Courses file not found at {self.courses_file}")
            raise NotFoundError("Courses file not found.")

        with open(self.courses_file, 'r', encoding='utf-8') as f:
            return json.load(f)

    @custom_logger.log_function_call
    def get_course(self, course_id: Union[str, int]) -> Dict[str, Any]:
        """
        Read a single course by id
        @param course_id: str | int - id used as the file name (<id>.json)
        @returns: The course JSON exactly as stored
        @raises: NotFoundError if the id escapes the courses directory or has no file
        """
        course_path = self._course_path(course_id)
        if course_path is None or not course_path.is_file():
            logger.info(f"Course {course_id!r} not found")
            raise NotFoundError("Course not found.")

        with open(course_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _course_path(self, course_id):
        course_id = str(course_id)
        if not course_id:
            return None
        # None when the id would resolve outside courses_dir
        course_path = safe_join(str(self.courses_dir), f"{course_id}.json")
        return Path(course_path) if course_path else None
