from django.conf import settings
from django.db import models
from django.utils import timezone
import uuid


class ReflectionStatus(models.TextChoices):
    DONE = 'done', 'Done'
    PARTLY_DONE = 'partly done', 'Partly done'
    NOT_DONE = 'not done', 'Not done'


class Goal(models.Model):
    """Default (platform-wide) or user-created habit target."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    # Bonus awarded to the reward purse on done / partly done
    associated_tokens = models.PositiveIntegerField(default=0)
    # Tokens taken from the creator's base purse when a custom goal is created
    pledge_amount = models.PositiveIntegerField(default=0)

    target_time = models.DateTimeField(null=True, blank=True)
    is_default = models.BooleanField(default=False)

    # Null for default goals
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='goals'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'goals'
        ordering = ['-is_default', 'created_at']
        indexes = [
            models.Index(fields=['is_default'], name='goals_is_defa_4c2f8e_idx'),
            models.Index(fields=['user', 'created_at'], name='goals_user_id_9b1d3a_idx'),
        ]

    def __str__(self):
        owner = 'default' if self.is_default else str(self.user)
        return f"{self.name} ({owner})"

    def is_visible_to(self, user):
        return self.is_default or self.user_id == user.pk


class UserGoal(models.Model):
    """A user's one-time reflection on a goal."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='goal_reflections'
    )
    goal = models.ForeignKey(
        Goal,
        on_delete=models.CASCADE,
        related_name='reflections'
    )

    completed = models.BooleanField(default=False)
    reflection_status = models.CharField(
        max_length=20,
        choices=ReflectionStatus.choices
    )
    completed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'user_goals'
        ordering = ['-completed_at']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'goal'],
                name='unique_reflection_per_user_goal',
            ),
        ]

    def __str__(self):
        return f"{self.user} - {self.goal.name}: {self.reflection_status}"
