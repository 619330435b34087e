# apps/core/admin.py

from django.contrib import admin
from django.db.models import Count, Q
from django.utils.html import format_html

from .models import Project, Task, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin das contas da API

    Contas nascem pelo endpoint de registro; o hash nunca é editável aqui.
    """

    list_display = ['username', 'projects_count', 'created_at']
    search_fields = ['username']
    ordering = ['-created_at']
    readonly_fields = ['username', 'password_hash', 'created_at']

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_projects_count=Count('projects'))

    def has_add_permission(self, request):
        return False

    def projects_count(self, obj):
        return obj._projects_count

    projects_count.short_description = 'Projetos'
    projects_count.admin_order_field = '_projects_count'


class TaskInline(admin.TabularInline):
    """Tarefas exibidas dentro do projeto"""

    model = Task
    extra = 0
    fields = ['title', 'due_date', 'is_completed', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin para gerenciamento de projetos"""

    list_display = [
        'title', 'owner', 'tasks_progress', 'created_at'
    ]
    list_filter = ['created_at']
    search_fields = ['title', 'description', 'owner__username']
    readonly_fields = ['created_at']
    inlines = [TaskInline]

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('title', 'description', 'owner')
        }),
        ('Datas', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        })
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('owner').annotate(
            _tasks_total=Count('tasks'),
            _tasks_done=Count('tasks', filter=Q(tasks__is_completed=True)),
        )

    def tasks_progress(self, obj):
        """Tarefas concluídas / total"""
        return f"{obj._tasks_done}/{obj._tasks_total}"

    tasks_progress.short_description = 'Tarefas'


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    """Admin de tarefas"""

    list_display = ['title', 'project', 'due_date', 'status_badge', 'created_at']
    list_filter = ['is_completed', 'due_date']
    search_fields = ['title', 'project__title']
    list_select_related = ['project']
    readonly_fields = ['created_at']

    def status_badge(self, obj):
        """Exibe a situação da tarefa com badge colorido"""
        if obj.is_completed:
            cor, texto = '#10B981', 'Concluída'  # verde
        else:
            cor, texto = '#F59E0B', 'Pendente'  # amarelo
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, texto
        )

    status_badge.short_description = 'Situação'
    status_badge.admin_order_field = 'is_completed'
