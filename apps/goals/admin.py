from django.contrib import admin
from .models import Goal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('text', 'project', 'total_number', 'remaining_number', 'unit', 'scale', 'is_completed')
    list_filter = ('unit', 'is_completed')
    search_fields = ('text',)
    readonly_fields = ('scale',)
