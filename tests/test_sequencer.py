import pytest

from boosterpack.app import BoosterApp
from boosterpack.config import BoosterPackConfig
from boosterpack.domain.cards import SceneLayout
from boosterpack.domain.results import ErrorKind
from boosterpack.domain.sequencer import Phase
from boosterpack.testing import app_fixture, build_catalog


@pytest.fixture()
def app():
    return app_fixture()


def test_phases_run_in_order_for_single_pack(app):
    app.add_pack(0, 2)
    sequencer = app.new_sequencer()
    assert sequencer.phase is Phase.IDLE

    result = sequencer.start()
    assert result.ok
    assert sequencer.phase is Phase.REVEAL_PACK
    assert sequencer.current == result.value

    assert sequencer.advance() is Phase.FLIP_CARDS
    assert sequencer.advance() is Phase.DISPERSE
    assert sequencer.advance() is Phase.CLOSE
    assert sequencer.finished
    assert sequencer.advance() is Phase.CLOSE


def test_all_mode_loops_into_next_pack(app):
    app.inventory.set_open_mode(False)
    app.add_pack(0, 2)
    app.add_pack(1, 3)
    sequencer = app.new_sequencer()
    sequencer.start()

    phases = [sequencer.advance() for _ in range(6)]
    assert phases == [
        Phase.FLIP_CARDS,
        Phase.DISPERSE,
        Phase.REVEAL_PACK,
        Phase.FLIP_CARDS,
        Phase.DISPERSE,
        Phase.CLOSE,
    ]
    assert [pack.pack_type for pack in sequencer.opened] == [0, 1]


def test_single_mode_stops_after_one_pack(app):
    app.add_pack(0, 2)
    app.add_pack(0, 2)
    sequencer = app.new_sequencer()
    sequencer.start()
    while not sequencer.finished:
        sequencer.advance()
    assert len(sequencer.opened) == 1
    assert len(app.inventory) == 1


def test_failed_open_closes_scene(app):
    sequencer = app.new_sequencer()
    result = sequencer.start()
    assert result.error is ErrorKind.EMPTY_QUEUE
    assert sequencer.phase is Phase.CLOSE
    assert sequencer.current is None


def test_failed_follow_up_pack_closes_scene(app):
    app.inventory.set_open_mode(False)
    app.add_pack(0, 2)
    app.add_pack(0, 1)
    sequencer = app.new_sequencer()
    sequencer.start()
    sequencer.advance()
    sequencer.advance()
    assert sequencer.advance() is Phase.CLOSE
    assert len(sequencer.opened) == 1
    assert app.messages.dump() == ["Error: Invalid pack data."]


def test_start_and_advance_guards(app):
    sequencer = app.new_sequencer()
    with pytest.raises(RuntimeError):
        sequencer.advance()
    app.add_pack(0, 2)
    sequencer.start()
    with pytest.raises(RuntimeError):
        sequencer.start()


def test_card_slots_follow_layout():
    layout = SceneLayout(back_card="Back", back_image="Table", card_positions=((10, 20), (30, 40)))
    app = BoosterApp(
        BoosterPackConfig(rng_seed=3),
        catalog=build_catalog({4: 1}, {0: (4,)}, layout=layout),
    )
    sequencer = app.new_sequencer()
    assert sequencer.card_slots() == []
    app.add_pack(0, 3)
    sequencer.start()
    assert sequencer.card_slots() == [(4, (10, 20)), (4, (30, 40)), (4, None)]
