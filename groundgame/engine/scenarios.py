"""Simulation parameter resolver: scenario keywords, presets and sliders."""

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from groundgame.config import is_valid_focus_area
from groundgame.schemas.simulation import DEFAULT_PARAMETERS, SimulationParameters


class UnknownPresetError(KeyError):
    """Preset name is not in the preset table."""


class UnknownFieldError(KeyError):
    """Slider targets a parameter that does not exist."""


class SliderBoundsError(ValueError):
    """Slider value is outside the allowed range for its field."""


@dataclass(frozen=True, eq=False)
class ScenarioRule:
    """
    A keyword-triggered parameter patch.

    The patch is applied on top of the defaults (base="defaults") or on
    top of the current parameters (base="current").
    """

    name: str
    keywords: tuple[str, ...]
    patch: dict[str, Union[float, str]] = field(default_factory=dict)
    base: Literal["defaults", "current"] = "defaults"

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.keywords)

    def apply(self, current: SimulationParameters) -> SimulationParameters:
        start = DEFAULT_PARAMETERS if self.base == "defaults" else current
        return SimulationParameters(**{**start.model_dump(), **self.patch})


# Evaluated in order, first match wins
SCENARIO_RULES: tuple[ScenarioRule, ...] = (
    ScenarioRule(
        name="crisis",
        keywords=("crisis", "caída"),
        patch={"party_strength": 0.8, "competitor_impact": 0.15},
    ),
    ScenarioRule(
        name="optimista",
        keywords=("optimista", "ola"),
        patch={"party_strength": 1.25, "turnout_factor": 1.1},
    ),
    ScenarioRule(
        name="bello",
        keywords=("bello", "norte"),
        patch={"focus_area": "Bello", "turnout_factor": 1.15},
    ),
    ScenarioRule(
        name="reset",
        keywords=("reset", "reiniciar"),
    ),
)

# Unmatched text nudges turnout and keeps everything else as it was.
# This is intentionally not a reset.
FALLBACK_RULE = ScenarioRule(
    name="fallback",
    keywords=(),
    patch={"turnout_factor": 1.05},
    base="current",
)

PRESETS: dict[str, ScenarioRule] = {rule.name: rule for rule in SCENARIO_RULES}


def match_scenario(text: str) -> ScenarioRule:
    """Find the first rule whose keywords appear in the text."""
    for rule in SCENARIO_RULES:
        if rule.matches(text):
            return rule
    return FALLBACK_RULE


def resolve_scenario(
    text: str,
    current: Optional[SimulationParameters] = None,
) -> SimulationParameters:
    """
    Resolve free text into a full parameter set.

    Args:
        text: Scenario description, matched case-insensitively
        current: Parameters in effect (only used by the fallback rule)

    Returns:
        Replacement parameters
    """
    return match_scenario(text).apply(current or DEFAULT_PARAMETERS)


def get_preset(name: str) -> ScenarioRule:
    """Look up a preset by name (case-insensitive)."""
    rule = PRESETS.get(name.strip().lower())
    if rule is None:
        raise UnknownPresetError(name)
    return rule


def resolve_preset(name: str) -> SimulationParameters:
    """Parameters for a named preset."""
    return get_preset(name).apply(DEFAULT_PARAMETERS)


# Allowed slider ranges (inclusive low, inclusive high unless noted)
SLIDER_BOUNDS: dict[str, tuple[float, float]] = {
    "party_strength": (0.5, 1.5),
    "turnout_factor": (0.5, 1.5),
    "competitor_impact": (0.0, 1.0),  # Upper bound exclusive
}


def apply_field(
    params: SimulationParameters,
    field_name: str,
    value: Union[float, str],
) -> SimulationParameters:
    """
    Set exactly one parameter, as a slider or selector would.

    Raises:
        UnknownFieldError: If field_name is not a parameter
        SliderBoundsError: If the value is outside the field's range
    """
    if field_name == "focus_area":
        if not isinstance(value, str) or not is_valid_focus_area(value):
            raise SliderBoundsError(f"Invalid focus area: {value!r}")
        return params.model_copy(update={"focus_area": value})

    if field_name not in SLIDER_BOUNDS:
        raise UnknownFieldError(field_name)

    if isinstance(value, bool):
        raise SliderBoundsError(f"{field_name} must be numeric, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise SliderBoundsError(f"{field_name} must be numeric, got {value!r}")

    low, high = SLIDER_BOUNDS[field_name]
    upper_ok = number < high if field_name == "competitor_impact" else number <= high
    if not (low <= number and upper_ok):
        raise SliderBoundsError(f"{field_name}={number} outside [{low}, {high}]")

    return params.model_copy(update={field_name: number})
