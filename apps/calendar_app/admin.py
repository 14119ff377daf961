from django.contrib import admin
from .models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ('title', 'date', 'time', 'user')
    list_filter = ('date',)
    search_fields = ('title', 'notes')
