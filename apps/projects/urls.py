# apps/projects/urls.py

from django.urls import path

from . import views


def build_urlpatterns(services):
    """Rotas de projetos e tarefas com guard e store injetados"""
    deps = {'guard': services.guard, 'store': services.store}

    return [
        # === PROJETOS ===
        path('projects', views.ProjectListView.as_view(**deps), name='project_list'),
        path('projects/<int:project_id>', views.ProjectDetailView.as_view(**deps), name='project_detail'),

        # === TAREFAS ===
        path('projects/<int:project_id>/tasks', views.ProjectTaskCreateView.as_view(**deps), name='task_create'),
        path('tasks/<int:task_id>', views.TaskDetailView.as_view(**deps), name='task_detail'),
        path('tasks/<int:task_id>/toggle', views.TaskToggleView.as_view(**deps), name='task_toggle'),
    ]
