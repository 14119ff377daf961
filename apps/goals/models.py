# apps/goals/models.py
import uuid

from django.db import models


class Goal(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        related_name='goals'
    )
    text = models.CharField(max_length=200)

    # Amounts are kept as text, the way they were typed in
    total_number = models.CharField(max_length=32)
    remaining_number = models.CharField(max_length=32)
    is_completed = models.BooleanField(default=False)

    # TextChoices for the admin, mapped onto the domain GoalUnit enum
    class UnitChoices(models.TextChoices):
        PIECES = 'шт', 'Pieces'
        PACKS = 'уп', 'Packs'
        KILOGRAMS = 'кг', 'Kilograms'
        LITERS = 'л', 'Liters'
        METERS = 'м', 'Meters'
        EURO = '€', 'Euro'
        DOLLAR = '$', 'Dollar'
        RUBLE = '₽', 'Ruble'
        TENGE = '₸', 'Tenge'
        DAYS = 'дн', 'Days'
        WEEKS = 'нед', 'Weeks'
        MONTHS = 'мес', 'Months'
        HOURS = 'ч', 'Hours'

    unit = models.CharField(
        max_length=8,
        choices=UnitChoices.choices,
        default=UnitChoices.PIECES
    )

    # Units per grid cell, derived from the total (never edited by hand)
    scale = models.PositiveIntegerField(default=1)

    order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['order']

    def __str__(self):
        return self.text
