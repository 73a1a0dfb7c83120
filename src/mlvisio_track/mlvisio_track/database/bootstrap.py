from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..attendance.service import attendance_record_id
from ..common.datetime_utils import now_local, now_utc
from ..core.constants import (
    ATTENDANCE,
    COURSES,
    DEFAULT_GOAL_DESCRIPTION,
    DEFAULT_MARK_CONFIDENCE,
    DEFAULT_REQUIRED_PERCENTAGE,
    DEFAULT_STUDENT_REVIEW,
    LECTURERS,
    SCHEDULES,
    SETTINGS,
    SUBJECTS,
    USERS,
)
from ..core.enums import AttendanceStatus, Role, StudyMode
from ..users.credentials import hash_password
from .record_store import RecordStore

logger = logging.getLogger(__name__)

DEMO_DEPARTMENT = "HNDIT"
DEMO_SEMESTER = "4th Semester"

# (lecturerId, name, email)
DEMO_LECTURERS = [
    ("LEC001", "Sri.Sethuparan", "sethuparan@college.edu"),
    ("LEC002", "Prof. Priya Jayawardena", "priya.jayawardena@college.edu"),
    ("LEC003", "Mr. Sunil Bandara", "sunil.bandara@college.edu"),
]

# (name, registrationNumber, email, birthDate, type)
DEMO_STUDENTS = [
    ("T.Sarankan", "HNDIT/PT/2024/001", "sarangan@mlvisio.com", "2002-05-15", StudyMode.FULL_TIME),
    ("P.Nallamuthan", "HNDIT/PT/2024/002", "nallamuthan@mlvisio.com", "2002-04-10", StudyMode.PART_TIME),
    ("K.Jeyanthan", "HNDIT/PT/2024/003", "jeyan@mlvisio.com", "2002-03-20", StudyMode.FULL_TIME),
    ("S.Thenujan", "HNDIT/PT/2024/004", "thenujan@mlvisio.com", "2002-06-12", StudyMode.FULL_TIME),
    ("S.Gajan", "HNDIT/PT/2024/006", "gajan@mlvisio.com", "2002-07-18", StudyMode.PART_TIME),
]

DEMO_ADMIN = ("Admin One", "HNDIT-ADM-001", "admin1@mlvisio.com", "super")

# (courseCode, courseName, credits, lecturerId, department)
DEMO_SUBJECTS = [
    ("HNDIT401", "Data Structures and Algorithms", 3, "LEC001", "HNDIT"),
    ("HNDIT402", "Software Engineering Principles", 3, "LEC002", "HNDIT"),
    ("HNDIT403", "Mobile Application Development", 3, "LEC003", "HNDIT"),
    ("HNDIT404", "Database Management Systems", 4, "LEC001", "HNDIT"),
    ("HNDA401", "Graphic Design Fundamentals", 3, "LEC001", "HNDA"),
    ("HNDM401", "Marketing Strategies", 3, "LEC001", "HNDM"),
    ("HNDE401", "Electrical Circuits", 4, "LEC001", "HNDE"),
]

# (subjectCode, dayOfWeek, startTime, endTime, room, lecturerId)
DEMO_SCHEDULES = [
    ("HNDIT401", "Monday", "09:00", "11:00", "Lab 01", "LEC001"),
    ("HNDIT402", "Tuesday", "11:00", "13:00", "Lab 02", "LEC002"),
    ("HNDIT403", "Wednesday", "14:00", "16:00", "Lab 03", "LEC003"),
]

DEMO_YEAR = "2nd Year"
ATTENDANCE_DAYS = 3


def seed_lecturers(store: RecordStore, *, now: datetime) -> None:
    for lecturer_id, name, email in DEMO_LECTURERS:
        store.set(
            LECTURERS,
            lecturer_id,
            {"lecturerId": lecturer_id, "name": name, "email": email, "department": DEMO_DEPARTMENT, "createdAt": now},
        )


def seed_users(store: RecordStore, *, now: datetime) -> None:
    """Students and the admin, keyed by email; the password is the registration number."""
    for name, reg, email, birth_date, mode in DEMO_STUDENTS:
        store.set(
            USERS,
            email,
            {
                "name": name,
                "registrationNumber": reg,
                "email": email,
                "birthDate": birth_date,
                "year": DEMO_YEAR,
                "type": mode.value,
                "department": DEMO_DEPARTMENT,
                "role": Role.STUDENT.value,
                "vertexLabel": reg,
                "password": hash_password(reg),
                "isActive": True,
                "createdAt": now,
            },
        )

    name, reg, email, level = DEMO_ADMIN
    store.set(
        USERS,
        email,
        {
            "name": name,
            "registrationNumber": reg,
            "email": email,
            "adminLevel": level,
            "department": DEMO_DEPARTMENT,
            "role": Role.ADMIN.value,
            "password": hash_password(reg),
            "isActive": True,
            "createdAt": now,
        },
    )


def seed_subjects(store: RecordStore, *, now: datetime) -> None:
    """Write every subject to both the per-department tree and the flat collection."""
    for code, title, credits, lecturer_id, department in DEMO_SUBJECTS:
        doc = {
            "courseCode": code,
            "courseName": title,
            "semester": DEMO_SEMESTER,
            "credits": credits,
            "lecturerId": lecturer_id,
            "department": department,
            "isActive": True,
            "createdAt": now,
        }
        store.set(f"{COURSES}/{department}/semesters", DEMO_SEMESTER, {"name": DEMO_SEMESTER})
        store.set(f"{COURSES}/{department}/semesters/{DEMO_SEMESTER}/subjects", code, doc)
        store.set(SUBJECTS, code, doc)


def seed_schedules(store: RecordStore, *, now: datetime) -> None:
    for code, day, start, end, room, lecturer_id in DEMO_SCHEDULES:
        schedule_id = f"{code}_{day}_{start.replace(':', '')}"
        store.set(
            SCHEDULES,
            schedule_id,
            {
                "subjectCode": code,
                "dayOfWeek": day,
                "startTime": start,
                "endTime": end,
                "room": room,
                "year": DEMO_YEAR,
                "lecturerId": lecturer_id,
                "department": DEMO_DEPARTMENT,
                "isActive": True,
                "createdAt": now,
            },
        )


def seed_attendance(store: RecordStore, *, today: date, now: datetime) -> None:
    """A few days of history: everyone present except the last student each day."""
    subject = DEMO_SCHEDULES[0][0]
    for offset in range(ATTENDANCE_DAYS):
        day = (today - timedelta(days=offset)).isoformat()
        for index, (_, reg, _, _, _) in enumerate(DEMO_STUDENTS):
            absent = index == len(DEMO_STUDENTS) - 1
            store.set(
                ATTENDANCE,
                attendance_record_id(reg, day, subject),
                {
                    "registrationNumber": reg,
                    "vertexLabel": reg,
                    "subjectCode": subject,
                    "status": (AttendanceStatus.ABSENT if absent else AttendanceStatus.PRESENT).value,
                    "location": "Lab 01",
                    "date": day,
                    "timestamp": now - timedelta(days=offset),
                    "confidence": DEFAULT_MARK_CONFIDENCE,
                    "studentReview": DEFAULT_STUDENT_REVIEW,
                    "createdAt": now,
                },
            )


def seed_settings(store: RecordStore) -> None:
    store.set(
        SETTINGS,
        "attendanceGoal",
        {"requiredPercentage": DEFAULT_REQUIRED_PERCENTAGE, "description": DEFAULT_GOAL_DESCRIPTION},
    )


def seed_demo_data(store: RecordStore, *, today: Optional[date] = None, now: Optional[datetime] = None) -> None:
    """Idempotent: every document is written with a fixed id."""
    today = today or now_local().date()
    now = now or now_utc()

    seed_lecturers(store, now=now)
    seed_users(store, now=now)
    seed_subjects(store, now=now)
    seed_schedules(store, now=now)
    seed_attendance(store, today=today, now=now)
    seed_settings(store)
    logger.info(
        "Seeded %d lecturers, %d users, %d subjects, %d schedules",
        len(DEMO_LECTURERS),
        len(DEMO_STUDENTS) + 1,
        len(DEMO_SUBJECTS),
        len(DEMO_SCHEDULES),
    )
