# apps/projects/views.py

from django.http import JsonResponse

from apps.core.views import AuthenticatedApiView

from .forms import ProjectForm, TaskForm, TaskUpdateForm


class ProjectStoreView(AuthenticatedApiView):
    """Base das views que usam o ProjectStore injetado"""

    store = None


class ProjectListView(ProjectStoreView):
    """
    GET  /projects - lista os projetos do usuário
    POST /projects - cria projeto
    """

    def get(self, request, auth):
        projects = self.store.list_projects(auth)
        return JsonResponse([project.as_summary() for project in projects], safe=False)

    def post(self, request, auth):
        data = self.validate(ProjectForm, self.parse_body(request))
        project = self.store.create_project(auth, data['title'], data['description'])
        return self.created(project.as_summary(), f'/api/v1/projects/{project.id}')


class ProjectDetailView(ProjectStoreView):
    """
    GET    /projects/{id} - projeto com tarefas
    DELETE /projects/{id} - remove projeto e tarefas
    """

    def get(self, request, auth, project_id):
        project = self.store.get_project(auth, project_id, with_tasks=True)
        return JsonResponse(project.as_dict_with_tasks())

    def delete(self, request, auth, project_id):
        self.store.delete_project(auth, project_id)
        return self.no_content()


class ProjectTaskCreateView(ProjectStoreView):
    """POST /projects/{id}/tasks"""

    def post(self, request, auth, project_id):
        # Propriedade do projeto é verificada antes da validação do corpo
        project = self.store.get_project(auth, project_id)
        data = self.validate(TaskForm, self.parse_body(request))
        task = self.store.add_task(project, data['title'], data['due_date'])
        return self.created(task.as_dict(), f'/api/v1/projects/{project.id}/tasks/{task.id}')


class TaskDetailView(ProjectStoreView):
    """
    PUT    /tasks/{id} - atualização parcial
    DELETE /tasks/{id}
    """

    def put(self, request, auth, task_id):
        data = self.validate(TaskUpdateForm, self.parse_body(request))
        task = self.store.update_task(
            auth,
            task_id,
            title=data['title'],
            due_date=data['due_date'],
            is_completed=data['is_completed'],
        )
        return JsonResponse(task.as_dict())

    def delete(self, request, auth, task_id):
        self.store.delete_task(auth, task_id)
        return self.no_content()


class TaskToggleView(ProjectStoreView):
    """PUT /tasks/{id}/toggle"""

    def put(self, request, auth, task_id):
        task = self.store.toggle_task(auth, task_id)
        return JsonResponse(task.as_dict())
