from django import forms

from .domain.entities import parse_amount
from .domain.services import max_goal_total
from .models import Goal


class GoalForm(forms.Form):
    text = forms.CharField(max_length=200)
    # Kept as text: the amount is typed freely and coerced later
    total_number = forms.CharField(max_length=32)
    unit = forms.ChoiceField(choices=Goal.UnitChoices.choices, initial=Goal.UnitChoices.PIECES)

    def clean_text(self):
        text = self.cleaned_data['text'].strip()
        if not text:
            raise forms.ValidationError("Goal text cannot be empty")
        return text

    def clean_total_number(self):
        total_number = self.cleaned_data['total_number'].strip()
        limit = max_goal_total()
        if parse_amount(total_number) > limit:
            raise forms.ValidationError(f"Goal total cannot exceed {limit}")
        return total_number


class ProgressForm(forms.Form):
    amount = forms.IntegerField(min_value=1)

    def __init__(self, *args, remaining=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.remaining = remaining

    def clean_amount(self):
        amount = self.cleaned_data['amount']
        if self.remaining is not None and amount > self.remaining:
            raise forms.ValidationError(f"Only {self.remaining} left for this goal")
        return amount
