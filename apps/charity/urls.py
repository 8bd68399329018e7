from django.urls import path
from . import views

app_name = 'charity'

urlpatterns = [
    path('charity/organizations', views.organization_list, name='organizations'),
    path('charity/preview', views.preview, name='preview'),
    path('charity/distribute', views.distribute, name='distribute'),
    path('charity/distribute-selected', views.distribute_selected_view, name='distribute-selected'),
    path('charity/donate', views.donate_view, name='donate'),
    path('charity/history', views.history, name='history'),
]
