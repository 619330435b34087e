# config/urls.py

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

from apps.core.urls import build_urlpatterns as core_urlpatterns
from apps.projects.urls import build_urlpatterns as projects_urlpatterns
from apps.scheduler.urls import build_urlpatterns as scheduler_urlpatterns

from .services import build_services

services = build_services()

api_v1_patterns = (
    core_urlpatterns(services)
    + projects_urlpatterns(services)
    + scheduler_urlpatterns(services)
)

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API
    path('api/v1/', include((api_v1_patterns, 'api'), namespace='api')),

    # Redirecionamentos úteis
    path('', RedirectView.as_view(pattern_name='api:health', permanent=False)),
]

# Customizar títulos do admin
admin.site.site_header = 'MiniPM Admin'
admin.site.site_title = 'MiniPM'
admin.site.index_title = 'Administração do Sistema'
