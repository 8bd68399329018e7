# Initial schema for goals and goal reflections

import uuid
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('associated_tokens', models.PositiveIntegerField(default=0)),
                ('pledge_amount', models.PositiveIntegerField(default=0)),
                ('target_time', models.DateTimeField(blank=True, null=True)),
                ('is_default', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='goals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'goals',
                'ordering': ['-is_default', 'created_at'],
                'indexes': [
                    models.Index(fields=['is_default'], name='goals_is_defa_4c2f8e_idx'),
                    models.Index(fields=['user', 'created_at'], name='goals_user_id_9b1d3a_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='UserGoal',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('completed', models.BooleanField(default=False)),
                ('reflection_status', models.CharField(choices=[('done', 'Done'), ('partly done', 'Partly done'), ('not done', 'Not done')], max_length=20)),
                ('completed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('goal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reflections', to='goals.goal')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='goal_reflections', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'user_goals',
                'ordering': ['-completed_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'goal'), name='unique_reflection_per_user_goal'),
                ],
            },
        ),
    ]
