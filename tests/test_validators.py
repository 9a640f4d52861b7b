from random import Random

from boosterpack import BoosterApp, BoosterPackConfig
from boosterpack.config import DrawConfig
from boosterpack.diagnostics import DrawSimulator, run_checklist
from boosterpack.domain.cards import SceneLayout
from boosterpack.host.memory import InMemoryParty
from boosterpack.testing import app_fixture, build_catalog
from boosterpack.validators import validate_app


def test_validate_app_success():
    assert validate_app(app_fixture()) == []


def test_validate_app_detects_empty_pool_and_missing_items():
    catalog = build_catalog({1: 1}, {0: (1,), 1: ()}, gain_items={1: None})
    app = BoosterApp(BoosterPackConfig(), catalog=catalog)
    issues = validate_app(app)
    assert "Pack 1 does not list any cards." in issues
    assert "Pack 1 has an empty card pool and can never be opened." in issues
    assert "Card 1 has no gainItem; drawing it grants nothing." in issues


def test_validate_app_checks_items_against_party():
    catalog = build_catalog({1: 1}, {0: (1,)}, gain_items={1: 55})
    app = BoosterApp(BoosterPackConfig(), catalog=catalog, party=InMemoryParty(known_items={7}))
    assert validate_app(app) == ["Card 1 references unknown item 55."]


def test_validate_app_skips_items_with_battle_integration():
    catalog = build_catalog({1: 1}, {0: (1,)}, gain_items={1: None})
    app = BoosterApp(
        BoosterPackConfig(draw=DrawConfig(battle_integration=True)), catalog=catalog
    )
    assert validate_app(app) == []


def test_validate_app_flags_unopenable_queued_pack():
    app = app_fixture()
    app.add_pack(0, 1)
    issues = validate_app(app)
    assert issues == [
        "Queued pack 0 opens 1 card(s) but at least 2 are required to open it."
    ]


def test_checklist_reports_pool_problems():
    catalog = build_catalog({1: 1, 2: 20}, {0: (1, 2), 1: (1,), 2: ()})
    app = BoosterApp(BoosterPackConfig(), catalog=catalog)
    messages = {issue.message: issue.severity for issue in run_checklist(app)}
    assert messages["Pack 2 has an empty pool."] == "error"
    assert messages["Pack 1 can only ever draw card 1."] == "warning"
    assert messages["Card 2 makes up 95% of pack 0."] == "warning"
    assert messages["No card positions configured for the opening scene."] == "warning"


def test_checklist_with_layout_and_single_card_packs_allowed():
    layout = SceneLayout(card_positions=((0, 0), (1, 1)))
    catalog = build_catalog({1: 1, 2: 1}, {0: (1, 2)}, layout=layout)
    app = BoosterApp(
        BoosterPackConfig(draw=DrawConfig(min_cards_per_open=1)), catalog=catalog
    )
    assert run_checklist(app) == []


def test_simulator_converges_to_rarity_share():
    app = app_fixture()
    result = DrawSimulator(app, rng=Random(3)).simulate(0, pulls=20000)
    assert result.expected == {5: 0.25, 7: 0.75}
    assert sum(result.counts.values()) == 20000
    assert result.max_deviation() < 0.02
