from __future__ import annotations

from rest_framework import serializers

MODE_CHOICES = [("easy", "easy"), ("hard", "hard")]
FIELD_STATUSES = ["correct", "wrong", "higher", "lower", "unknown"]


def _normalize_mode(value: str) -> str:
    """Accept EASY/Easy/easy."""
    return (value or "").strip().lower()


class _ModeField(serializers.ChoiceField):
    def to_internal_value(self, data):
        return super().to_internal_value(_normalize_mode(data))


# PUBLIC_INTERFACE
class ModeQuerySerializer(serializers.Serializer):
    """Query parameters selecting the puzzle mode.

    Fields:
    - mode (optional, default 'easy'): easy (guess the model) or hard (guess the variant)
    """

    mode = _ModeField(required=False, choices=MODE_CHOICES, default="easy")


# PUBLIC_INTERFACE
class GuessRequestSerializer(serializers.Serializer):
    """Request payload to submit a guess against a puzzle."""

    puzzle_id = serializers.IntegerField(min_value=1)
    guess_id = serializers.IntegerField(min_value=1)


# PUBLIC_INTERFACE
class SearchQuerySerializer(serializers.Serializer):
    """Search query parameters."""

    q = serializers.CharField(min_length=1, trim_whitespace=True)


# PUBLIC_INTERFACE
class FieldFeedbackSerializer(serializers.Serializer):
    """Comparison outcome for a single field. value is always the target's value."""

    status = serializers.ChoiceField(choices=FIELD_STATUSES)
    value = serializers.JSONField(allow_null=True)


# PUBLIC_INTERFACE
class TodayPuzzleSerializer(serializers.Serializer):
    date = serializers.CharField()
    mode = serializers.ChoiceField(choices=MODE_CHOICES)
    puzzle_id = serializers.IntegerField()
    max_attempts = serializers.IntegerField()


# PUBLIC_INTERFACE
class YesterdayPuzzleSerializer(serializers.Serializer):
    date = serializers.CharField()
    mode = serializers.ChoiceField(choices=MODE_CHOICES)
    label = serializers.CharField()


# PUBLIC_INTERFACE
class PuzzleOverviewResponseSerializer(serializers.Serializer):
    """Response payload for today's puzzle, with yesterday's answer when known."""

    today = TodayPuzzleSerializer()
    yesterday = YesterdayPuzzleSerializer(allow_null=True)


# PUBLIC_INTERFACE
class GuessResponseSerializer(serializers.Serializer):
    """Response payload after submitting a guess."""

    feedback = serializers.DictField(child=FieldFeedbackSerializer(), help_text="Per-field feedback.")
    is_correct = serializers.BooleanField()
    guess = serializers.DictField(help_text="Guessed entity id, label and field values.")


# PUBLIC_INTERFACE
class SuggestionSerializer(serializers.Serializer):
    """Search suggestion."""

    id = serializers.IntegerField()
    label = serializers.CharField()
