from decimal import Decimal

from django.test import TestCase

from core.exceptions import InvalidScoreEntryError
from scores.models import Participant, blank_scorecard
from tours.tests.factories import ParticipantFactory, PlayerFactory


class ParticipantModelTests(TestCase):

    def setUp(self):
        self.player = PlayerFactory(handicap_index=Decimal("12.3"))
        self.participant = ParticipantFactory(
            player=self.player, hole_scores=blank_scorecard(), handicap_index=None, is_locked=False
        )

    def test_handicap_captured_on_first_entry(self):
        self.participant.record_hole_score(1, 4)
        self.participant.save()

        self.assertEqual(self.participant.handicap_index, Decimal("12.3"))
        self.assertEqual(self.participant.hole_scores[0], 4)

    def test_handicap_snapshot_is_not_refreshed(self):
        self.participant.record_hole_score(1, 4)
        self.participant.save()

        self.player.handicap_index = Decimal("5.0")
        self.player.save()

        participant = Participant.objects.get(pk=self.participant.id)
        participant.record_hole_score(2, 5)
        participant.save()

        participant.refresh_from_db()
        self.assertEqual(participant.handicap_index, Decimal("12.3"))

    def test_no_handicap_at_first_entry_stays_empty(self):
        self.player.handicap_index = None
        self.player.save()

        self.participant.record_hole_score(1, 4)
        self.player.handicap_index = Decimal("9.9")
        self.participant.record_hole_score(2, 4)

        self.assertIsNone(self.participant.handicap_index)

    def test_invalid_hole_score_is_rejected(self):
        with self.assertRaises(InvalidScoreEntryError):
            self.participant.record_hole_score(1, -2)
        with self.assertRaises(InvalidScoreEntryError):
            self.participant.record_hole_score(19, 4)

        self.assertEqual(self.participant.hole_scores, blank_scorecard())
        self.assertIsNone(self.participant.handicap_index)

    def test_gave_up_marker_is_accepted(self):
        self.participant.record_hole_score(6, -1)
        self.assertEqual(self.participant.hole_scores[5], -1)

    def test_locked_scorecard_cannot_change(self):
        self.participant.is_locked = True
        with self.assertRaises(InvalidScoreEntryError):
            self.participant.record_hole_score(1, 4)
        with self.assertRaises(InvalidScoreEntryError):
            self.participant.record_manual_total(80)

    def test_manual_total(self):
        self.participant.record_manual_total(78, out_score=40, in_score=40)
        entry = self.participant.to_raw_entry()

        self.assertEqual(entry.manual_total.total, 78)
        self.assertEqual(entry.manual_total.out_score, 40)
        self.assertEqual(entry.handicap_index, Decimal("12.3"))

    def test_manual_total_must_be_positive(self):
        with self.assertRaises(InvalidScoreEntryError):
            self.participant.record_manual_total(-72)
        self.assertIsNone(self.participant.manual_total)

    def test_to_raw_entry_rejects_corrupt_scorecard(self):
        self.participant.hole_scores = [4] * 17
        with self.assertRaises(InvalidScoreEntryError):
            self.participant.to_raw_entry()

    def test_edits_are_audited(self):
        self.participant.record_hole_score(1, 4)
        self.participant.save()
        self.participant.record_hole_score(1, 5)
        self.participant.save()

        history = self.participant.history.all()
        self.assertEqual(history.count(), 3)
        self.assertEqual(history.first().hole_scores[0], 5)
