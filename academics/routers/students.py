import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academics.core.deps import get_db
from academics.core.errors import ConflictError, NotFoundError
from academics.db.session import is_storable_id
from academics.models.student import Student
from academics.schemas.student import StudentCreate, StudentRead

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_student_exists(db: Session, student_id: int) -> Student:
    student = None
    if is_storable_id(student_id):
        student = db.query(Student).filter(Student.id == student_id).first()
    if not student:
        raise NotFoundError("Student not found")
    return student


def _apply(student: Student, payload: StudentCreate) -> None:
    student.first_name = payload.first_name
    student.last_name = payload.last_name
    student.email = payload.email
    student.date_of_birth = payload.date_of_birth
    student.student_id = payload.student_id


def _commit_or_conflict(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email or student number already registered")


@router.get("", response_model=list[StudentRead])
def list_students(db: Session = Depends(get_db)):
    return db.query(Student).order_by(Student.id.asc()).all()


@router.get("/{student_id}", response_model=StudentRead, responses={404: {"description": "Student not found"}})
def get_student(student_id: int, db: Session = Depends(get_db)):
    return _ensure_student_exists(db, student_id)


@router.post(
    "",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid data"}, 409: {"description": "Already registered"}},
)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)):
    student = Student()
    _apply(student, payload)
    db.add(student)
    _commit_or_conflict(db)
    db.refresh(student)
    logger.info("student %s registered (%s)", student.id, student.student_id)
    return student


@router.put("/{student_id}", response_model=StudentRead, responses={404: {"description": "Student not found"}})
def update_student(student_id: int, payload: StudentCreate, db: Session = Depends(get_db)):
    student = _ensure_student_exists(db, student_id)
    _apply(student, payload)
    _commit_or_conflict(db)
    db.refresh(student)
    return student


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Student not found"}},
)
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student = _ensure_student_exists(db, student_id)
    db.delete(student)
    db.commit()
    logger.info("student %s deleted with its grades", student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
