# apps/scheduler/views.py

from django.http import JsonResponse

from apps.core.exceptions import ValidationError
from apps.core.views import AuthenticatedApiView

from .forms import ScheduleForm
from .scheduler import schedule


class ProjectScheduleView(AuthenticatedApiView):
    """
    POST /projects/{id}/schedule

    Agenda as tarefas incompletas do projeto. O resultado não é salvo.
    """

    store = None
    clock = None

    def post(self, request, auth, project_id):
        project = self.store.get_project(auth, project_id, with_tasks=True)
        data = self.validate(ScheduleForm, self.parse_body(request))

        start_date = data['start_date'] or self.clock.today()
        try:
            entries = schedule(project.tasks.all(), start_date, data['days_per_task'])
        except OverflowError:
            message = 'Schedule ends after the last supported date'
            raise ValidationError(message, fields={'startDate': [message], 'daysPerTask': [message]})

        return JsonResponse({
            'projectId': project.id,
            'schedule': [entry.as_dict() for entry in entries],
        })
