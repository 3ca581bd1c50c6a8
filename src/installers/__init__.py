from src.installers.db_container import (
    PLACEHOLDER,
    PLACEHOLDER_VERSION,
    TemplateNotFoundError,
    db_container_installer,
    install_db_container,
    install_db_container_async,
    render_start_script,
    sanitize_name,
)
from src.installers.registry import (
    DATABASE_PROVIDERS,
    DatabaseProvider,
    Installer,
    InstallerOptions,
    parse_database_provider,
    uses_db_container,
)

__all__ = [
    "DATABASE_PROVIDERS",
    "PLACEHOLDER",
    "PLACEHOLDER_VERSION",
    "DatabaseProvider",
    "Installer",
    "InstallerOptions",
    "TemplateNotFoundError",
    "db_container_installer",
    "install_db_container",
    "install_db_container_async",
    "parse_database_provider",
    "render_start_script",
    "sanitize_name",
    "uses_db_container",
]
