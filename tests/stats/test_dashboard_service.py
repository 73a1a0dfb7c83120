from mlvisio_track.stats.service import percentage


def test_percentage_rounds_half_up_and_guards_zero():
    assert percentage(0, 0) == 0
    assert percentage(5, 0) == 0
    assert percentage(1, 8) == 13  # 12.5
    assert percentage(2, 3) == 67
    assert percentage(3, 3) == 100


def test_dashboard_with_no_students(container, fixed_today):
    stats = container.dashboard_service.dashboard(today=fixed_today)

    assert stats == {
        "totalStudents": 0,
        "presentToday": 0,
        "absentToday": 0,
        "attendanceRate": 0,
        "totalCourses": 0,
        "departmentAttendance": [],
        "studyModeCounts": {"fullTime": 0, "partTime": 0},
    }


def test_dashboard_counts_unique_students(container, store, add_user, add_attendance, fixed_today):
    add_user("u1", registrationNumber="S1", department="HNDIT", type="Full Time")
    add_user("u2", registrationNumber="S2", department="HNDIT", type="part time")
    add_user("u3", registrationNumber="S3", department="HNDA", type="Evening")
    add_user("u4", registrationNumber="S4", department="HNDA", isActive=False)
    add_user("adm", registrationNumber="A1", role="admin")

    # S1 checks into two classes; still one present student.
    add_attendance("a1", registrationNumber="S1", date="2024-05-03", subjectCode="HNDIT401")
    add_attendance("a2", registrationNumber="S1", date="2024-05-03", subjectCode="HNDIT402")
    add_attendance("a3", registrationNumber="S2", date="2024-05-03", status="Absent")
    add_attendance("a4", registrationNumber="S3", date="2024-05-02")
    add_attendance("a5", registrationNumber="S2", date="2024-05-03", status="Late")

    store.set("courses/HNDIT/semesters/4th Semester/subjects", "HNDIT401", {"courseCode": "HNDIT401"})
    store.set("courses/HNDIT/semesters/4th Semester/subjects", "HNDIT402", {"courseCode": "HNDIT402"})
    store.set("courses/HNDA/semesters/1st Semester/subjects", "HNDA101", {"courseCode": "HNDA101"})
    store.set("subjects", "FLAT1", {"department": "HNDM"})

    stats = container.dashboard_service.dashboard(today=fixed_today)

    assert stats["totalStudents"] == 3
    assert stats["presentToday"] == 1
    assert stats["absentToday"] == 1
    assert stats["attendanceRate"] == 33
    assert stats["totalCourses"] == 3
    assert stats["departmentAttendance"] == [
        {"department": "HNDA", "rate": 0},
        {"department": "HNDIT", "rate": 50},
    ]
    assert stats["studyModeCounts"] == {"fullTime": 2, "partTime": 1}


def test_department_of_present_student_outside_active_set(container, add_user, add_attendance, fixed_today):
    add_user("u1", registrationNumber="S1", department="HNDIT")
    add_user("u2", registrationNumber="S2", department="HNDIT", isActive=False)
    add_attendance("a1", registrationNumber="S2", date="2024-05-03")

    stats = container.dashboard_service.dashboard(today=fixed_today)

    assert stats["presentToday"] == 1
    assert stats["attendanceRate"] == 100
    assert stats["departmentAttendance"] == [{"department": "HNDIT", "rate": 100}]
