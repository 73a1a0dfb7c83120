from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import requests

from .activity.service import ActivityService
from .attendance.firestore_attendance_repository import FirestoreAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_DEPARTMENTS
from .database.record_store import RecordStore
from .lecturers.firestore_lecturer_repository import FirestoreLecturerRepository
from .schedules.firestore_schedule_repository import FirestoreScheduleRepository
from .schedules.service import ScheduleService
from .settings.firestore_settings_repository import FirestoreSettingsRepository
from .settings.service import SettingsService
from .stats.service import DashboardService
from .subjects.firestore_subject_repository import FirestoreSubjectRepository
from .subjects.service import SubjectService
from .uploads.imgur_client import ImgurClient, ImgurConfig
from .users.firestore_user_repository import FirestoreUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: RecordStore

    users_repo: FirestoreUserRepository
    lecturers_repo: FirestoreLecturerRepository
    subjects_repo: FirestoreSubjectRepository
    schedules_repo: FirestoreScheduleRepository
    attendance_repo: FirestoreAttendanceRepository
    settings_repo: FirestoreSettingsRepository

    auth_service: AuthService
    user_service: UserService
    subject_service: SubjectService
    schedule_service: ScheduleService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    activity_service: ActivityService
    settings_service: SettingsService
    imgur_client: ImgurClient


def build_container(
    *,
    store: RecordStore,
    imgur_config: ImgurConfig,
    departments: Sequence[str] = DEFAULT_DEPARTMENTS,
    http_session: Optional[requests.Session] = None,
) -> Container:
    users_repo = FirestoreUserRepository(store)
    lecturers_repo = FirestoreLecturerRepository(store)
    subjects_repo = FirestoreSubjectRepository(store)
    schedules_repo = FirestoreScheduleRepository(store)
    attendance_repo = FirestoreAttendanceRepository(store)
    settings_repo = FirestoreSettingsRepository(store)

    return Container(
        store=store,
        users_repo=users_repo,
        lecturers_repo=lecturers_repo,
        subjects_repo=subjects_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        subject_service=SubjectService(subjects_repo, lecturers_repo, departments),
        schedule_service=ScheduleService(schedules_repo, lecturers_repo),
        attendance_service=AttendanceService(attendance_repo, users_repo),
        dashboard_service=DashboardService(users_repo, attendance_repo, subjects_repo, departments),
        activity_service=ActivityService(attendance_repo),
        settings_service=SettingsService(settings_repo),
        imgur_client=ImgurClient(imgur_config, session=http_session),
    )
