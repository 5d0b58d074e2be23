from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assignments.repository import AssignmentRepository
from .assignments.service import AssignmentService
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .core.constants import ATTENDANCE_BUFFER_MINUTES, DEMO_PROFILES
from .core.enums import Role
from .dashboard.service import OrchestrationService
from .quizzes.repository import QuizRepository
from .quizzes.service import QuizService
from .reports.service import ManagementReportService
from .schedules.agenda import AgendaCalculator
from .schedules.service import ScheduleService
from .students.repository import StudentRepository
from .students.service import StudentService
from .tuition.repository import TuitionRepository
from .tuition.service import TuitionService
from .users.repository import ProfileRepository
from .users.service import AuthService, ProfileService
from .vocabulary.repository import VocabularyRepository
from .vocabulary.service import VocabularyService


@dataclass(frozen=True)
class Container:
    backend: str

    classes_repo: ClassRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    tuitions_repo: TuitionRepository
    profiles_repo: ProfileRepository
    assignments_repo: AssignmentRepository
    vocabulary_repo: VocabularyRepository
    quizzes_repo: QuizRepository

    auth_service: AuthService
    profile_service: ProfileService
    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    tuition_service: TuitionService
    schedule_service: ScheduleService
    orchestration_service: OrchestrationService
    report_service: ManagementReportService
    assignment_service: AssignmentService
    vocabulary_service: VocabularyService
    quiz_service: QuizService


def _mysql_repositories(db_config: dict) -> dict:
    from .assignments.mysql_assignment_repository import MySQLAssignmentRepository
    from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
    from .classes.mysql_class_repository import MySQLClassRepository
    from .database.connection import DatabaseConnection, DBConfig
    from .quizzes.mysql_quiz_repository import MySQLQuizRepository
    from .students.mysql_student_repository import MySQLStudentRepository
    from .tuition.mysql_tuition_repository import MySQLTuitionRepository
    from .users.mysql_profile_repository import MySQLProfileRepository
    from .vocabulary.mysql_vocabulary_repository import MySQLVocabularyRepository

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return {
        "classes_repo": MySQLClassRepository(conn),
        "students_repo": MySQLStudentRepository(conn),
        "attendance_repo": MySQLAttendanceRepository(conn),
        "tuitions_repo": MySQLTuitionRepository(conn),
        "profiles_repo": MySQLProfileRepository(conn),
        "assignments_repo": MySQLAssignmentRepository(conn),
        "vocabulary_repo": MySQLVocabularyRepository(conn),
        "quizzes_repo": MySQLQuizRepository(conn),
    }


def _kv_repositories(store=None) -> dict:
    from .kv.repositories import (
        KVAssignmentRepository,
        KVAttendanceRepository,
        KVClassRepository,
        KVProfileRepository,
        KVQuizRepository,
        KVStudentRepository,
        KVTuitionRepository,
        KVVocabularyRepository,
    )
    from .kv.store import InMemoryKeyValueStore

    store = store if store is not None else InMemoryKeyValueStore()
    profiles = KVProfileRepository(store)
    for full_name, email, password, role in DEMO_PROFILES:
        if not profiles.get_by_email(email):
            profiles.add(full_name=full_name, email=email, password=password, role=Role(role))

    return {
        "classes_repo": KVClassRepository(store),
        "students_repo": KVStudentRepository(store),
        "attendance_repo": KVAttendanceRepository(store),
        "tuitions_repo": KVTuitionRepository(store),
        "profiles_repo": profiles,
        "assignments_repo": KVAssignmentRepository(store),
        "vocabulary_repo": KVVocabularyRepository(store),
        "quizzes_repo": KVQuizRepository(store),
    }


def build_container(
    *,
    db_config: Optional[dict] = None,
    backend: str = "mysql",
    buffer_minutes: int = ATTENDANCE_BUFFER_MINUTES,
    kv_store=None,
) -> Container:
    backend = (backend or "mysql").lower()
    if backend == "kv":
        repos = _kv_repositories(kv_store)
    elif backend == "mysql":
        if not db_config:
            raise ValueError("db_config is required for the mysql backend")
        repos = _mysql_repositories(db_config)
    else:
        raise ValueError(f"Unknown backend: {backend!r}")

    classes = repos["classes_repo"]
    students = repos["students_repo"]
    attendance = repos["attendance_repo"]
    tuitions = repos["tuitions_repo"]
    profiles = repos["profiles_repo"]
    agenda = AgendaCalculator(buffer_minutes=buffer_minutes)

    return Container(
        backend=backend,
        **repos,
        auth_service=AuthService(profiles),
        profile_service=ProfileService(profiles),
        class_service=ClassService(classes),
        student_service=StudentService(students, classes),
        attendance_service=AttendanceService(attendance, students, classes),
        tuition_service=TuitionService(tuitions, students),
        schedule_service=ScheduleService(classes),
        orchestration_service=OrchestrationService(classes, attendance, tuitions, agenda=agenda),
        report_service=ManagementReportService(classes, tuitions, attendance),
        assignment_service=AssignmentService(repos["assignments_repo"], classes),
        vocabulary_service=VocabularyService(repos["vocabulary_repo"], classes),
        quiz_service=QuizService(repos["quizzes_repo"], classes, students),
    )
