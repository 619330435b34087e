# apps/scheduler/urls.py

from django.urls import path

from . import views


def build_urlpatterns(services):
    """Rota do agendador com guard, store e relógio injetados"""
    return [
        path(
            'projects/<int:project_id>/schedule',
            views.ProjectScheduleView.as_view(
                guard=services.guard,
                store=services.store,
                clock=services.clock,
            ),
            name='project_schedule'
        ),
    ]
