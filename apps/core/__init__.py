# apps/core/__init__.py

"""
Core - Aplicação principal do MiniPM

Contém:
- Models (User, Project, Task) com consultas escopadas pelo dono
- Serviço de credenciais (hash de senha e tokens)
- Guarda de propriedade (AuthContext)
- Views de autenticação e health check
- Comando de seed para desenvolvimento
"""
