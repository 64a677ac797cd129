"""Service namespaces exposed as attributes of :class:`GitLabClient`."""

from .access_requests import AccessRequestsService
from .alert_management import AlertManagementService
from .audit_events import AuditEventsService
from .base import Service
from .branches import BranchesService
from .broadcast_messages import BroadcastMessagesService
from .commits import CommitsService
from .deploy_keys import DeployKeysService
from .deploy_tokens import DeployTokensService
from .environments import EnvironmentsService
from .gitignore_templates import GitIgnoreTemplatesService
from .jobs import JobsService
from .markdown_uploads import GroupMarkdownUploadsService, ProjectMarkdownUploadsService
from .protected_branches import ProtectedBranchesService
from .system_hooks import SystemHooksService
from .todos import TodosService

__all__ = [
    "AccessRequestsService",
    "AlertManagementService",
    "AuditEventsService",
    "BranchesService",
    "BroadcastMessagesService",
    "CommitsService",
    "DeployKeysService",
    "DeployTokensService",
    "EnvironmentsService",
    "GitIgnoreTemplatesService",
    "GroupMarkdownUploadsService",
    "JobsService",
    "ProjectMarkdownUploadsService",
    "ProtectedBranchesService",
    "Service",
    "SystemHooksService",
    "TodosService",
]
