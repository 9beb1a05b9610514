import unittest

from ucms.core.enums import CourseLevel
from ucms.core.exceptions import (
    AlreadyEnrolledError, AlreadyTeachingError, CourseExistsError, CourseFullError,
    MaxEnrollmentError, NotEnrolledError, NotTeachingError, ProfessorLoadError,
    WrongInputsError
)
from ucms.services import RegistryService, seed_initial_data


class RegistryTestCase(unittest.TestCase):

    def setUp(self):
        self.registry = seed_initial_data(RegistryService())

    def assert_invariants(self):
        students = self.registry.students
        professors = self.registry.professors
        courses = self.registry.courses
        for student in students:
            self.assertLessEqual(len(student.enrolled_courses), 3)
            for course in courses:
                self.assertEqual(
                    course in student.enrolled_courses,
                    student in course.enrolled_students,
                )
        for course in courses:
            self.assertLessEqual(len(course.enrolled_students), 3)
            self.assertEqual(len(set(map(id, course.enrolled_students))), len(course.enrolled_students))
        for professor in professors:
            assigned = professor.assigned_courses
            self.assertLessEqual(len(assigned), 2)
            self.assertEqual(len(set(map(id, assigned))), len(assigned))
        self.assertEqual([c.course_id for c in courses], list(range(1, len(courses) + 1)))
        member_ids = [m.member_id for m in students + professors]
        self.assertEqual(len(member_ids), len(set(member_ids)))
        self.assertTrue(all(member_id > 0 for member_id in member_ids))


class TestBootstrap(RegistryTestCase):

    def test_courses(self):
        names = [(c.course_id, c.course_name, c.course_level) for c in self.registry.courses]
        self.assertEqual(names, [
            (1, "java_beginner", CourseLevel.BACHELOR),
            (2, "java_intermediate", CourseLevel.BACHELOR),
            (3, "python_basics", CourseLevel.BACHELOR),
            (4, "algorithms", CourseLevel.MASTER),
            (5, "advanced_programming", CourseLevel.MASTER),
            (6, "mathematical_analysis", CourseLevel.MASTER),
            (7, "computer_vision", CourseLevel.MASTER),
        ])

    def test_members(self):
        students = {s.member_name: (s.member_id, [c.course_id for c in s.enrolled_courses])
                    for s in self.registry.students}
        self.assertEqual(students, {
            "Alice": (1, [1, 2, 3]),
            "Bob": (2, [1, 4]),
            "Alex": (3, [5]),
        })
        professors = {p.member_name: (p.member_id, [c.course_id for c in p.assigned_courses])
                      for p in self.registry.professors}
        self.assertEqual(professors, {
            "Ali": (4, [1, 2]),
            "Ahmed": (5, [3, 5]),
            "Andrey": (6, [6]),
        })

    def test_counters(self):
        self.assertEqual(self.registry.last_course_id, 7)
        self.assertEqual(self.registry.last_member_id, 6)
        self.assert_invariants()

    def test_rosters(self):
        rosters = {c.course_id: [s.member_name for s in c.enrolled_students] for c in self.registry.courses}
        self.assertEqual(rosters[1], ["Alice", "Bob"])
        self.assertEqual(rosters[5], ["Alex"])
        self.assertEqual(rosters[7], [])

    def test_statistics(self):
        stats = self.registry.get_statistics()
        self.assertEqual(stats['courses'], 7)
        self.assertEqual(stats['students'], 3)
        self.assertEqual(stats['professors'], 3)
        self.assertEqual(stats['enrollments'], 6)
        self.assertEqual(stats['assignments'], 5)


class TestCreation(RegistryTestCase):

    def test_member_ids_shared_between_students_and_professors(self):
        professor = self.registry.register_professor("bob")
        student = self.registry.register_student("bob")
        self.assertEqual(professor.member_id, 7)
        self.assertEqual(student.member_id, 8)
        self.assert_invariants()

    def test_course_ids_continue(self):
        course = self.registry.register_course("data_science", CourseLevel.MASTER)
        self.assertEqual(course.course_id, 8)
        self.assertIs(self.registry.get_course(8), course)

    def test_duplicate_course_rejected(self):
        with self.assertRaises(CourseExistsError):
            self.registry.register_course("algorithms", CourseLevel.BACHELOR)
        self.assertEqual(len(self.registry.courses), 7)
        self.assertEqual(self.registry.last_course_id, 7)


class TestLookup(RegistryTestCase):

    def test_member_resolved_only_in_its_category(self):
        self.assertEqual(self.registry.find_student(1).member_name, "Alice")
        self.assertEqual(self.registry.find_professor(4).member_name, "Ali")
        with self.assertRaises(WrongInputsError):
            self.registry.find_student(4)
        with self.assertRaises(WrongInputsError):
            self.registry.find_professor(1)

    def test_course_bounds(self):
        self.assertEqual(self.registry.get_course(1).course_name, "java_beginner")
        self.assertEqual(self.registry.get_course(7).course_name, "computer_vision")
        for course_id in (0, -1, 8):
            with self.subTest(course_id=course_id):
                with self.assertRaises(WrongInputsError):
                    self.registry.get_course(course_id)


class TestEnrollment(RegistryTestCase):

    def test_enroll_then_drop_restores_state(self):
        before = self.registry.to_dict()
        self.registry.enroll(2, 3)
        self.assertIn(self.registry.get_course(3), self.registry.find_student(2).enrolled_courses)
        self.assert_invariants()
        self.registry.drop(2, 3)
        self.assertEqual(self.registry.to_dict(), before)

    def test_already_enrolled_checked_before_max_enrolment(self):
        with self.assertRaises(AlreadyEnrolledError):
            self.registry.enroll(1, 1)

    def test_max_enrolment(self):
        with self.assertRaises(MaxEnrollmentError):
            self.registry.enroll(1, 4)

    def test_max_enrolment_checked_before_capacity(self):
        self.registry.enroll(3, 4)
        newcomer = self.registry.register_student("eve")
        self.registry.enroll(newcomer.member_id, 4)
        self.assertTrue(self.registry.get_course(4).is_full())
        with self.assertRaises(MaxEnrollmentError):
            self.registry.enroll(1, 4)

    def test_course_full(self):
        self.registry.enroll(3, 1)
        newcomer = self.registry.register_student("eve")
        with self.assertRaises(CourseFullError):
            self.registry.enroll(newcomer.member_id, 1)
        self.assertEqual(newcomer.enrolled_courses, [])
        self.assert_invariants()

    def test_member_resolved_before_course(self):
        with self.assertRaises(WrongInputsError) as ctx:
            self.registry.enroll(99, 99)
        self.assertEqual(ctx.exception.details['member_id'], 99)

    def test_drop_not_enrolled(self):
        with self.assertRaises(NotEnrolledError):
            self.registry.drop(3, 1)

    def test_drop_requires_student(self):
        with self.assertRaises(WrongInputsError):
            self.registry.drop(4, 1)


class TestAssignment(RegistryTestCase):

    def test_load_checked_before_duplicate(self):
        with self.assertRaises(ProfessorLoadError):
            self.registry.teach(4, 1)
        with self.assertRaises(ProfessorLoadError):
            self.registry.teach(4, 3)

    def test_already_teaching(self):
        with self.assertRaises(AlreadyTeachingError):
            self.registry.teach(6, 6)

    def test_teach_then_exempt(self):
        before = self.registry.to_dict()
        professor = self.registry.teach(6, 7)
        self.assertEqual([c.course_id for c in professor.assigned_courses], [6, 7])
        self.assert_invariants()
        self.registry.exempt(6, 7)
        self.assertEqual([c.course_id for c in professor.assigned_courses], [6])
        self.assertEqual(self.registry.to_dict(), before)

    def test_exempt_not_teaching(self):
        self.registry.exempt(6, 6)
        with self.assertRaises(NotTeachingError):
            self.registry.exempt(6, 6)

    def test_teach_requires_professor(self):
        with self.assertRaises(WrongInputsError):
            self.registry.teach(1, 7)


if __name__ == '__main__':
    unittest.main()
