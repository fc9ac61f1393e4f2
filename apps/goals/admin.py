from django.contrib import admin
from .models import Goal, GoalMilestone


class GoalMilestoneInline(admin.TabularInline):
    model = GoalMilestone
    extra = 0
    fields = ('name', 'status', 'order', 'target_date')

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('name', 'status', 'target_date', 'user', 'created_at')
    list_filter = ('status',)
    search_fields = ('name',)
    inlines = [GoalMilestoneInline]
