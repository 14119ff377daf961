# apps/calendar_app/filters.py
import django_filters
from django import forms

from .models import CalendarEvent


class EventFilter(django_filters.FilterSet):
    day = django_filters.DateFilter(
        field_name='date',
        label="Day",
        widget=forms.DateInput(attrs={'type': 'date'})
    )
    date = django_filters.DateFromToRangeFilter(label="Between")
    title = django_filters.CharFilter(lookup_expr='icontains', label="Title contains")

    class Meta:
        model = CalendarEvent
        fields = []
