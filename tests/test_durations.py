"""Tests for the SQLAlchemy-backed duration store."""

from deepfocus.database.db import configure_engine, get_session
from deepfocus.database.durations import DurationRepository
from deepfocus.database.models import StoredDuration
from deepfocus.timer.engine import TimerEngine
from deepfocus.timer.modes import Mode


class TestDurationRepository:

    def test_nothing_stored(self):
        repo = DurationRepository()
        for mode in Mode:
            assert repo.load_duration(mode) is None

    def test_save_then_load(self):
        repo = DurationRepository()
        repo.save_duration(Mode.FOCUS, 1800)
        assert repo.load_duration(Mode.FOCUS) == 1800.0
        assert repo.load_duration(Mode.SHORT_BREAK) is None

    def test_save_overwrites(self):
        repo = DurationRepository()
        repo.save_duration(Mode.LONG_BREAK, 1200)
        repo.save_duration(Mode.LONG_BREAK, 1500)
        assert repo.load_duration(Mode.LONG_BREAK) == 1500.0
        with get_session() as db:
            assert db.query(StoredDuration).count() == 1

    def test_keyed_by_mode_identifier(self):
        DurationRepository().save_duration(Mode.LONG_BREAK, 1200)
        with get_session() as db:
            row = db.get(StoredDuration, "LONG REST")
            assert row is not None
            assert row.seconds == 1200.0

    def test_missing_table_reads_as_empty(self):
        configure_engine("sqlite:///:memory:")  # no init_db → no tables
        repo = DurationRepository()
        assert repo.load_duration(Mode.FOCUS) is None

    def test_missing_table_drops_write(self):
        configure_engine("sqlite:///:memory:")
        DurationRepository().save_duration(Mode.FOCUS, 1800)  # should not raise


class TestEngineWithRepository:

    def test_adjustment_survives_a_new_engine(self, qapp):
        first = TimerEngine(parent=None, store=DurationRepository())
        first.switch_viewed(Mode.SHORT_BREAK)
        first.adjust_duration(2)

        second = TimerEngine(parent=None, store=DurationRepository())
        assert second.duration_for(Mode.SHORT_BREAK) == 900
        assert second.duration_for(Mode.FOCUS) == Mode.FOCUS.factory_duration

    def test_zero_in_database_means_factory(self, qapp):
        with get_session() as db:
            db.add(StoredDuration(mode=Mode.FOCUS.value, seconds=0.0))
        eng = TimerEngine(parent=None, store=DurationRepository())
        assert eng.remaining == Mode.FOCUS.factory_duration
