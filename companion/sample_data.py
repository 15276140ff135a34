"""
Seed content for a fresh install.
"""

from __future__ import annotations

from braingym.recovery.workout import Exercise, WorkoutTemplate
from braingym.sm2.card_state import Card, Deck
from braingym.utils import EPOCH


DEFAULT_JOKES = (
    "No review today? Even your biceps study more than you do.",
    "Ten cards and I'll let you skip half a mental squat.",
    "Fifteen minutes of review. Then you can go back to being a legend.",
    "Future you says thanks. Present you grumbles. That's normal.",
    "Discipline beats motivation. A good joke helps a bit, though.",
)


def _seed_card(card_id: str, front: str, back: str) -> Card:
    return Card(id=card_id, front=front, back=back, due_at=EPOCH)


def sample_decks() -> tuple[Deck, ...]:
    return (
        Deck(
            id="deck_ibd",
            name="IBD - essentials",
            cards=(
                _seed_card(
                    "c1",
                    "Crohn's vs UC: one key anatomical difference?",
                    "Crohn's: skip lesions, transmural, anywhere in the GI tract (often ileum); "
                    "UC: continuous, mucosal, colon/rectum.",
                ),
                _seed_card(
                    "c2",
                    "IBD: one common extra-intestinal complication?",
                    "Joint involvement (arthritis/arthralgia), skin (erythema nodosum), eyes (uveitis), etc.",
                ),
                _seed_card(
                    "c3",
                    "UC: which long-term risk increases?",
                    "Colorectal cancer (depends on duration/extent), hence endoscopic surveillance.",
                ),
            ),
        ),
        Deck(
            id="deck_ra",
            name="RA - basics",
            cards=(
                _seed_card(
                    "p1",
                    "RA: which autoantibodies are typical?",
                    "Rheumatoid factor (RF) and anti-CCP (ACPA); anti-CCP is more specific.",
                ),
                _seed_card(
                    "p2",
                    "RA: classic morning triad?",
                    "Inflammatory pain, prolonged morning stiffness, joint swelling.",
                ),
            ),
        ),
    )


def sample_workout_templates() -> tuple[WorkoutTemplate, ...]:
    return (
        WorkoutTemplate(
            id="w_upper",
            name="Upper body - Strength",
            est_minutes=60,
            target="Strength",
            exercises=(
                Exercise("Bench press", 5, "3-5", 8),
                Exercise("Barbell row", 4, "6-8", 8),
                Exercise("Overhead press", 4, "5-8", 8),
                Exercise("Pull-ups", 4, "AMRAP", 8),
                Exercise("Lateral raises", 3, "12-20", 7),
            ),
        ),
        WorkoutTemplate(
            id="w_lower",
            name="Lower body - Strength",
            est_minutes=70,
            target="Strength",
            exercises=(
                Exercise("Squat", 5, "3-5", 8),
                Exercise("Romanian deadlift", 4, "6-8", 8),
                Exercise("Lunges", 3, "8-12", 8),
                Exercise("Calf raises", 4, "10-15", 7),
            ),
        ),
        WorkoutTemplate(
            id="w_end",
            name="Cardio - Endurance",
            est_minutes=45,
            target="Endurance",
            exercises=(
                Exercise("Zone 2 (bike/run)", 1, "45 min", 6),
                Exercise("Mobility", 1, "10 min", 3),
            ),
        ),
    )
