from datetime import timedelta

from dugout.domain.player import PlayerID, PlayerRole
from dugout.domain.roster_entry import RosterStatus
from dugout.domain.roster_event import ActivatedPlayerOnRoster, AddedPlayerToRoster, RemovedPlayerFromRoster
from dugout.services.roster_query import RosterQueryService
from tests.fakes.stores import FakeRosterEventStore, StubLeagueLock
from tests.helpers import TEAM_A, TEAM_B, TODAY_LOCK, TOMORROW_LOCK


def _seed(store: FakeRosterEventStore) -> None:
    store.seed(
        TEAM_A,
        [
            AddedPlayerToRoster(team_id=TEAM_A, player_id=PlayerID(1), effective_at=TODAY_LOCK - timedelta(days=1)),
            AddedPlayerToRoster(team_id=TEAM_A, player_id=PlayerID(2), effective_at=TODAY_LOCK),
            ActivatedPlayerOnRoster(
                team_id=TEAM_A, player_id=PlayerID(2), role=PlayerRole.HITTER, effective_at=TOMORROW_LOCK
            ),
            RemovedPlayerFromRoster(team_id=TEAM_A, player_id=PlayerID(1), effective_at=TOMORROW_LOCK),
        ],
    )


class TestRosterQueryService:
    def test_current_view_uses_last_lock(self, fake_store: FakeRosterEventStore, league_lock: StubLeagueLock) -> None:
        _seed(fake_store)
        view = RosterQueryService(fake_store, league_lock).current_view(TEAM_A)

        assert view.effective_through == TODAY_LOCK
        assert [(e.player_id, e.status) for e in view.entries] == [
            (1, RosterStatus.INACTIVE),
            (2, RosterStatus.INACTIVE),
        ]

    def test_upcoming_view_uses_next_lock(
        self, fake_store: FakeRosterEventStore, league_lock: StubLeagueLock
    ) -> None:
        _seed(fake_store)
        view = RosterQueryService(fake_store, league_lock).upcoming_view(TEAM_A)

        assert view.effective_through == TOMORROW_LOCK
        assert [(e.player_id, e.status) for e in view.entries] == [(2, RosterStatus.ACTIVE_HITTER)]

    def test_view_through_arbitrary_instant(
        self, fake_store: FakeRosterEventStore, league_lock: StubLeagueLock
    ) -> None:
        _seed(fake_store)
        through = TODAY_LOCK - timedelta(hours=1)
        view = RosterQueryService(fake_store, league_lock).view_through(TEAM_A, through)

        assert view.effective_through == through
        assert [e.player_id for e in view.entries] == [1]

    def test_unknown_team_is_empty(self, fake_store: FakeRosterEventStore, league_lock: StubLeagueLock) -> None:
        _seed(fake_store)
        query = RosterQueryService(fake_store, league_lock)

        assert query.current_view(TEAM_B).entries == []
        assert query.history(TEAM_B) == []

    def test_history_in_sequence_order(self, fake_store: FakeRosterEventStore, league_lock: StubLeagueLock) -> None:
        _seed(fake_store)
        history = RosterQueryService(fake_store, league_lock).history(TEAM_A)

        assert [r.sequence for r in history] == [1, 2, 3, 4]
        assert isinstance(history[3].event, RemovedPlayerFromRoster)
