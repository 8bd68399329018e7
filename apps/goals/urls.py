from django.urls import path
from . import views

app_name = 'goals'

urlpatterns = [
    path('goals', views.goal_list, name='goal-list'),
    path('goals/custom', views.custom_goal_create, name='goal-custom'),
    path('goals/default', views.DefaultGoalView.as_view(), name='goal-default'),
    path('goals/reflect', views.reflect, name='goal-reflect'),
    path('goals/complete', views.complete, name='goal-complete'),
]
