from django.contrib import admin
from .models import Project, Cell


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('project_name', 'user', 'show_grid', 'deadline', 'updated_at')
    list_filter = ('show_grid',)
    search_fields = ('project_name',)


@admin.register(Cell)
class CellAdmin(admin.ModelAdmin):
    list_display = ('project', 'position', 'is_colored')
    list_filter = ('is_colored',)
