import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academics.core.deps import get_db
from academics.core.errors import ConflictError, NotFoundError
from academics.db.session import is_storable_id
from academics.models.course import Course
from academics.schemas.course import CourseCreate, CourseRead

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_course_exists(db: Session, course_id: int) -> Course:
    course = None
    if is_storable_id(course_id):
        course = db.query(Course).filter(Course.id == course_id).first()
    if not course:
        raise NotFoundError("Course not found")
    return course


def _commit_or_conflict(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Course code already exists")


@router.get("", response_model=list[CourseRead])
def list_courses(db: Session = Depends(get_db)):
    return db.query(Course).order_by(Course.id.asc()).all()


@router.get("/{course_id}", response_model=CourseRead, responses={404: {"description": "Course not found"}})
def get_course(course_id: int, db: Session = Depends(get_db)):
    return _ensure_course_exists(db, course_id)


@router.post(
    "",
    response_model=CourseRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid data"}, 409: {"description": "Course code already exists"}},
)
def create_course(payload: CourseCreate, db: Session = Depends(get_db)):
    course = Course(code=payload.code, name=payload.name, credits=payload.credits)
    db.add(course)
    _commit_or_conflict(db)
    db.refresh(course)
    logger.info("course %s created (%s)", course.id, course.code)
    return course


@router.put("/{course_id}", response_model=CourseRead, responses={404: {"description": "Course not found"}})
def update_course(course_id: int, payload: CourseCreate, db: Session = Depends(get_db)):
    course = _ensure_course_exists(db, course_id)
    course.code = payload.code
    course.name = payload.name
    course.credits = payload.credits
    _commit_or_conflict(db)
    db.refresh(course)
    return course


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Course not found"}},
)
def delete_course(course_id: int, db: Session = Depends(get_db)):
    course = _ensure_course_exists(db, course_id)
    db.delete(course)
    db.commit()
    logger.info("course %s deleted with its grades", course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
