# apps/core/urls.py

from django.urls import path

from . import views


def build_urlpatterns(services):
    """Rotas de autenticação com os serviços injetados pela raiz de composição"""
    return [
        # === AUTENTICAÇÃO ===
        path('auth/register', views.RegisterView.as_view(auth_service=services.auth), name='register'),
        path('auth/login', views.LoginView.as_view(auth_service=services.auth), name='login'),

        # === MONITORAMENTO ===
        path('health', views.health_check, name='health'),
    ]
