#!/usr/bin/env python3
"""
Demo script showing the opportunity engine in action.

Usage:
    python scripts/demo.py

Ranks the Medellín - Bello catalog under each preset and a free-text
scenario, printing the top zones and the projected total against the
candidate's safe threshold.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from groundgame.engine.session import create_default_session
from groundgame.engine.targets import (
    CANDIDATE_SAFE_THRESHOLD,
    PARTY_NAME,
    assess_threshold,
    opportunity_tier,
)


def print_header(title: str):
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_results(session, limit: int = 5):
    """Print ranking results in a readable format."""
    params = session.parameters
    print(
        f"\n⚙️  strength={params.party_strength} turnout={params.turnout_factor} "
        f"competitor={params.competitor_impact} focus={params.focus_area}"
    )

    result = session.rank()
    print("\n📍 Top Zones:")
    for ranked in result.top(limit):
        tier = opportunity_tier(ranked.opportunity_index)
        print(
            f"   {ranked.rank}. {ranked.zone.name}: {ranked.opportunity_index * 100:.1f}% "
            f"({tier.key}) ~{ranked.estimated_votes:,} votos"
        )

    status = assess_threshold(result.total_votes)
    emoji = "✅" if status.status == "safe" else "⚠️" if status.status == "at_risk" else "❌"
    print(
        f"\n{emoji} Total: {result.total_votes:,} / {CANDIDATE_SAFE_THRESHOLD:,} "
        f"({status.progress_pct:.1f}%, {status.status})"
    )


def main():
    session = create_default_session()

    print_header(f"{PARTY_NAME} - Baseline")
    print_results(session)

    for preset in ("crisis", "optimista", "bello"):
        session.apply_preset(preset)
        print_header(f"Preset: {preset}")
        print_results(session)

    session.reset()
    text = "Escenario de ola azul en Antioquia"
    rule = session.apply_scenario(text)
    print_header(f"Scenario: {text!r} -> {rule.name}")
    print_results(session)


if __name__ == "__main__":
    main()
