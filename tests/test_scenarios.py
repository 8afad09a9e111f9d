"""Tests for scenario resolution, presets, sliders and the session verbs."""

import pytest

from groundgame.engine.scenarios import (
    FALLBACK_RULE,
    PRESETS,
    SliderBoundsError,
    UnknownFieldError,
    UnknownPresetError,
    apply_field,
    match_scenario,
    resolve_preset,
    resolve_scenario,
)
from groundgame.engine.session import UnknownSegmentError, create_default_session
from groundgame.schemas.simulation import DEFAULT_PARAMETERS, SimulationParameters


DEFAULTS = SimulationParameters(
    party_strength=1.0, turnout_factor=1.0, competitor_impact=0.0, focus_area="All"
)


class TestScenarioRules:
    """Tests for free-text keyword resolution."""

    def test_crisis(self):
        params = resolve_scenario("Estamos en crisis total")
        assert params == SimulationParameters(
            party_strength=0.8, competitor_impact=0.15, turnout_factor=1.0, focus_area="All"
        )

    def test_caida_case_insensitive(self):
        assert match_scenario("CAÍDA en las encuestas").name == "crisis"

    def test_optimista_ignores_current_state(self):
        """Matched rules start from defaults, not from the current state."""
        current = SimulationParameters(competitor_impact=0.3, focus_area="Bello")
        params = resolve_scenario("Escenario optimista", current)
        assert params == SimulationParameters(party_strength=1.25, turnout_factor=1.1)

    def test_ola_keyword(self):
        assert match_scenario("Se viene una OLA azul").name == "optimista"

    def test_bello_focus(self):
        params = resolve_scenario("Enfoque en el norte")
        assert params.focus_area == "Bello"
        assert params.turnout_factor == 1.15
        assert params.party_strength == 1.0

    def test_first_match_wins(self):
        """Crisis is listed before Bello."""
        assert match_scenario("crisis en Bello").name == "crisis"
        assert match_scenario("Bello optimista").name == "optimista"

    @pytest.mark.parametrize("text", ["reset", "Reiniciar todo", "RESET please"])
    def test_reset_keywords(self, text):
        current = SimulationParameters(party_strength=1.4, competitor_impact=0.2, focus_area="Bello")
        assert resolve_scenario(text, current) == DEFAULTS

    def test_fallback_nudges_turnout_only(self):
        """Unmatched text keeps current values and sets turnout to 1.05.

        This mirrors long-standing behavior: it is neither a no-op nor a reset.
        """
        current = SimulationParameters(party_strength=1.3, competitor_impact=0.1, focus_area="Medellín")
        params = resolve_scenario("sin novedades en la campaña", current)

        assert match_scenario("sin novedades en la campaña") is FALLBACK_RULE
        assert params == SimulationParameters(
            party_strength=1.3, turnout_factor=1.05, competitor_impact=0.1, focus_area="Medellín"
        )

    def test_fallback_without_current_uses_defaults(self):
        assert resolve_scenario("") == SimulationParameters(turnout_factor=1.05)


class TestPresets:
    """Tests for named presets."""

    def test_reset_after_any_scenario(self):
        for text in ("crisis", "optimista", "bello", "nada"):
            resolve_scenario(text)
            assert resolve_preset("reset") == DEFAULTS

    def test_preset_names_case_insensitive(self):
        assert resolve_preset("CRISIS") == resolve_scenario("crisis")

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError):
            resolve_preset("landslide")

    def test_rules_are_hashable(self):
        """Rules can key a dict or cache even though they carry a dict patch."""
        rules = {rule: rule.name for rule in [*PRESETS.values(), FALLBACK_RULE]}
        assert rules[PRESETS["crisis"]] == "crisis"
        assert rules[FALLBACK_RULE] == "fallback"


class TestSliders:
    """Tests for single-field slider updates."""

    def test_sets_exactly_one_field(self):
        params = apply_field(DEFAULT_PARAMETERS, "party_strength", 1.3)
        assert params == SimulationParameters(party_strength=1.3)
        assert DEFAULT_PARAMETERS.party_strength == 1.0

    @pytest.mark.parametrize("value", [0.5, 1.5])
    def test_bounds_inclusive(self, value):
        assert apply_field(DEFAULT_PARAMETERS, "turnout_factor", value).turnout_factor == value

    @pytest.mark.parametrize(
        "field,value",
        [
            ("party_strength", 1.51),
            ("turnout_factor", 0.49),
            ("competitor_impact", 1.0),
            ("competitor_impact", -0.1),
            ("focus_area", "Envigado"),
            ("party_strength", "mucho"),
            ("party_strength", True),
            ("turnout_factor", False),
            ("turnout_factor", float("nan")),
        ],
    )
    def test_out_of_bounds(self, field, value):
        with pytest.raises(SliderBoundsError):
            apply_field(DEFAULT_PARAMETERS, field, value)

    def test_unknown_field(self):
        with pytest.raises(UnknownFieldError):
            apply_field(DEFAULT_PARAMETERS, "budget", 1.0)

    def test_focus_area(self):
        assert apply_field(DEFAULT_PARAMETERS, "focus_area", "Medellín").focus_area == "Medellín"


class TestSession:
    """Tests for the campaign session verbs."""

    @pytest.fixture
    def session(self):
        return create_default_session()

    def test_apply_scenario_replaces_parameters(self, session):
        rule = session.apply_scenario("Estamos en crisis total")
        assert rule.name == "crisis"
        assert session.parameters.party_strength == 0.8

    def test_crisis_lowers_total(self, session):
        baseline = session.rank().total_votes
        session.apply_preset("crisis")
        assert session.rank().total_votes < baseline

    def test_failed_slider_leaves_state(self, session):
        session.set_field("party_strength", 1.2)
        with pytest.raises(SliderBoundsError):
            session.set_field("party_strength", 2.0)
        assert session.parameters.party_strength == 1.2

    def test_reset_keeps_segments(self, session):
        session.toggle_segment("s1")
        session.apply_preset("optimista")
        session.reset()
        assert session.parameters == DEFAULTS
        assert not next(s for s in session.segments if s.id == "s1").active

    def test_toggle_segment(self, session):
        before = session.rank()
        segment = session.toggle_segment("s5")
        assert segment.active
        assert "s5" in {s.id for s in session.active_segments}
        assert session.rank() != before

    def test_all_segments_off_is_neutral(self, session):
        for segment in session.segments:
            session.set_segment_active(segment.id, False)
        result = session.rank()
        assert all(r.score.avg_weight == 1.0 for r in result.zones)

    def test_unknown_segment(self, session):
        with pytest.raises(UnknownSegmentError):
            session.toggle_segment("s99")

    def test_hexagons_per_zone(self, session):
        hexagons = session.hexagons(0.006)
        assert set(hexagons) == {z.id for z in session.zones}
        assert all(len(v) == 6 for v in hexagons.values())
        assert len(session.grid_hexagons(60)) == len(session.zones)

    def test_top_zones(self, session):
        assert len(session.top_zones(8)) == 8
