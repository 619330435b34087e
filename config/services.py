# config/services.py

"""
Raiz de composição

Monta os colaboradores da API uma única vez e os entrega às views
via as_view(). Nenhum outro módulo cria instâncias globais.
"""

from dataclasses import dataclass

from apps.core.auth_service import AuthenticationService
from apps.core.permissions import OwnershipGuard
from apps.projects.store import ProjectStore
from apps.scheduler.clock import SystemClock


@dataclass(frozen=True)
class Services:
    guard: OwnershipGuard
    auth: AuthenticationService
    store: ProjectStore
    clock: object


def build_services() -> Services:
    """Constrói os serviços a partir das settings"""
    return Services(
        guard=OwnershipGuard.from_settings(),
        auth=AuthenticationService.from_settings(),
        store=ProjectStore(),
        clock=SystemClock(),
    )
