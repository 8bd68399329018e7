from django.contrib import admin
from .models import Goal, UserGoal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'is_default',
        'user',
        'pledge_amount',
        'associated_tokens',
        'target_time',
        'created_at',
    ]
    list_filter = ['is_default', 'created_at']
    search_fields = ['name', 'user__email']
    readonly_fields = ['pledge_amount', 'created_at']


@admin.register(UserGoal)
class UserGoalAdmin(admin.ModelAdmin):
    """Reflections are settled by the service and never edited."""

    list_display = ['user', 'goal', 'reflection_status', 'completed', 'completed_at']
    list_filter = ['reflection_status', 'completed']
    search_fields = ['user__email', 'goal__name']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
