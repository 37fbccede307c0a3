from types import SimpleNamespace

from django.db.models import ProtectedError
from django.test import SimpleTestCase, TestCase

from core.exceptions import InvalidParProfileError, MissingParProfileError
from courses.models import Course
from courses.pars import CourseParProfile
from tours.tests.factories import CompetitionFactory, CourseFactory, PARS_72


class CourseParProfileTests(SimpleTestCase):

    def test_totals(self):
        profile = CourseParProfile(tuple(PARS_72))
        self.assertEqual(profile.front_nine_total, 36)
        self.assertEqual(profile.back_nine_total, 36)
        self.assertEqual(profile.total, 72)

    def test_par_for_hole(self):
        profile = CourseParProfile(tuple(PARS_72))
        self.assertEqual(profile.par_for(1), 4)
        self.assertEqual(profile.par_for(4), 5)
        self.assertEqual(profile.par_for(18), 5)

    def test_requires_eighteen_holes(self):
        with self.assertRaises(MissingParProfileError):
            CourseParProfile(tuple(PARS_72[:17]))

    def test_rejects_par_out_of_range(self):
        pars = list(PARS_72)
        pars[2] = 7
        with self.assertRaises(InvalidParProfileError):
            CourseParProfile(tuple(pars))

        pars[2] = 2
        with self.assertRaises(InvalidParProfileError):
            CourseParProfile(tuple(pars))

    def test_from_holes_orders_by_hole_number(self):
        holes = [SimpleNamespace(hole_number=n, par=par) for n, par in enumerate(PARS_72, 1)]
        holes.reverse()
        profile = CourseParProfile.from_holes(holes)
        self.assertEqual(profile.pars, tuple(PARS_72))


class CourseModelTests(TestCase):

    def test_par_profile_from_course_holes(self):
        course = CourseFactory()
        profile = Course.objects.get(pk=course.id).par_profile()
        self.assertEqual(profile.total, 72)

    def test_nine_hole_course_has_no_profile(self):
        course = CourseFactory(holes=PARS_72[:9])
        with self.assertRaises(MissingParProfileError):
            course.par_profile()

    def test_course_used_by_a_competition_cannot_be_deleted(self):
        competition = CompetitionFactory()
        with self.assertRaises(ProtectedError):
            competition.course.delete()
        self.assertTrue(Course.objects.filter(pk=competition.course_id).exists())
